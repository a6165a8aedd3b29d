"""
Adaptateurs vers les systèmes externes.

- api/ : Passerelle vers l'API Kinopoisk Unofficial et téléchargement d'images
"""
