"""
Couche domaine (core).

Contient les entités de l'application hôte et les ports (interfaces abstraites).
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks).

Sous-packages :
- entities/ : Entités produites par les providers (Movie, Series, Person...)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
"""
