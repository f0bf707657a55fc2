"""
Marquee - Client de l'API de listing des films a venir.

Ce package interroge l'endpoint "upcoming movies" de l'API publique
Rotten Tomatoes, suit les liens de pagination fournis par le serveur
et livre les pages decodees sous forme de flux asynchrone.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, erreurs, configuration client)
- adapters/ : Couche infrastructure (client HTTP, pagination, CLI)
"""
