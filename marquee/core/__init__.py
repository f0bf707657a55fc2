"""
Couche domaine (core).

Contient les entites du listing, la configuration du client, la hierarchie
d'erreurs et les ports (interfaces abstraites).
Cette couche n'a AUCUNE dependance vers l'infrastructure (httpx, CLI).

Sous-packages :
- entities/ : Entites du listing (UpcomingMoviesPage, Movie, Star, Size)
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
"""
