"""
Constantes globales pour CineFamille.

Ce module contient les constantes partagees par les clients API:
- URLs de base des API externes et des CDN d'images
- Tailles d'images TMDB et IGDB
- Images de remplacement quand l'API ne fournit pas de visuel
- IDs de genre TMDB (films et series) et leur nom francais
"""

TMDB_BASE_URL = "https://api.themoviedb.org/3"
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p"

IGDB_BASE_URL = "https://api.igdb.com/v4"
TWITCH_AUTH_URL = "https://id.twitch.tv/oauth2/token"
IGDB_IMAGE_BASE_URL = "https://images.igdb.com/igdb/image/upload"

GOOGLE_BOOKS_BASE_URL = "https://www.googleapis.com/books/v1"

# Images de remplacement servies par le front
PLACEHOLDER_POSTER = "/placeholder-poster.jpg"
PLACEHOLDER_GAME = "/placeholder-game.jpg"
PLACEHOLDER_BOOK = "/placeholder-book.jpg"

# Tailles d'images TMDB
POSTER_MEDIUM = "w342"
POSTER_LARGE = "w500"
BACKDROP_LARGE = "w1280"
PROFILE_SMALL = "w185"

# Tailles d'images IGDB
IGDB_IMAGE_SIZES = {
    "thumb": "t_thumb",  # 90x90
    "small": "t_cover_small",  # 90x128
    "medium": "t_cover_big",  # 264x374
    "large": "t_720p",
    "hd": "t_1080p",
}

# Limite TMDB: au-dela de la page 500 l'API renvoie une erreur
TMDB_MAX_PAGE = 500

# IDs de genre TMDB (films)
GENRE_ANIMATION = 16
GENRE_FAMILY = 10751

# Mapping des IDs de genre TMDB vers noms francais (films)
TMDB_GENRE_MAPPING = {
    28: "Action",
    12: "Aventure",
    16: "Animation",
    35: "Comédie",
    80: "Crime",
    99: "Documentaire",
    18: "Drame",
    10751: "Familial",
    14: "Fantastique",
    36: "Histoire",
    27: "Horreur",
    10402: "Musique",
    9648: "Mystère",
    10749: "Romance",
    878: "Science-Fiction",
    10770: "Téléfilm",
    53: "Thriller",
    10752: "Guerre",
    37: "Western",
}

# Mapping des IDs de genre TMDB vers noms francais (series)
TMDB_TV_GENRE_MAPPING = {
    10759: "Action & Aventure",
    16: "Animation",
    35: "Comédie",
    80: "Crime",
    99: "Documentaire",
    18: "Drame",
    10751: "Familial",
    10762: "Kids",
    9648: "Mystère",
    10763: "News",
    10764: "Reality",
    10765: "Science-Fiction & Fantastique",
    10766: "Soap",
    10767: "Talk",
    10768: "War & Politics",
    37: "Western",
}
