"""Utilitaires partagés (constantes)."""
