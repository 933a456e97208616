"""
CineFamille - agregation de metadonnees media pour un site familial.

Interroge TMDB (films, series), IGDB (jeux video) et Google Books (livres),
et normalise les reponses en MediaItem exposes par une API FastAPI.
"""
