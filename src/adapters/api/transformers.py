"""
Transformation des reponses des API externes vers MediaItem.

Fonctions pures: aucune I/O, aucune exception. Un champ absent dans le
payload devient None (ou une liste vide) dans le MediaItem.

Contient aussi les helpers purs des adaptateurs: construction des URLs
d'images, extraction des certifications francaises TMDB, estimation de
l'age recommande pour un livre.
"""

from datetime import datetime, timezone
from typing import Optional

from src.adapters.api.schemas import (
    GoogleBooksImageLinks,
    GoogleBooksVolume,
    IGDBGame,
    TMDBContentRatings,
    TMDBCredits,
    TMDBMovie,
    TMDBMovieDetails,
    TMDBReleaseDates,
    TMDBTVDetails,
    TMDBTVShow,
)
from src.core.entities.media import CastMember, MediaItem, MediaType
from src.core.value_objects.rating import OfficialRating, map_certification, pegi_rating
from src.utils.constants import (
    BACKDROP_LARGE,
    IGDB_IMAGE_BASE_URL,
    IGDB_IMAGE_SIZES,
    PLACEHOLDER_BOOK,
    PLACEHOLDER_GAME,
    PLACEHOLDER_POSTER,
    POSTER_LARGE,
    POSTER_MEDIUM,
    PROFILE_SMALL,
    TMDB_GENRE_MAPPING,
    TMDB_IMAGE_BASE_URL,
    TMDB_TV_GENRE_MAPPING,
)

FRANCE = "FR"
MAX_CAST = 10


# ============================================
# TMDB helpers
# ============================================


def get_image_url(path: Optional[str], size: str = POSTER_MEDIUM) -> str:
    """
    Construit l'URL d'une image TMDB.

    Retourne l'image de remplacement si path est vide ou None, de sorte
    que l'appelant ne recoit jamais d'URL invalide.
    """
    if not path:
        return PLACEHOLDER_POSTER
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{TMDB_IMAGE_BASE_URL}/{size}{path}"


def get_french_certification(release_dates: Optional[TMDBReleaseDates]) -> Optional[str]:
    """
    Premiere certification non vide des sorties francaises d'un film.

    Premiere trouvee, pas la plus pertinente: l'ordre est celui de TMDB.
    """
    if release_dates is None:
        return None
    for country in release_dates.results:
        if country.iso_3166_1 == FRANCE:
            for release in country.release_dates:
                if release.certification:
                    return release.certification
            return None
    return None


def get_tv_french_rating(content_ratings: Optional[TMDBContentRatings]) -> Optional[str]:
    """Classification francaise d'une serie, ou None."""
    if content_ratings is None:
        return None
    for rating in content_ratings.results:
        if rating.iso_3166_1 == FRANCE:
            return rating.rating or None
    return None


def get_director(credits: Optional[TMDBCredits]) -> Optional[str]:
    """Nom du premier membre de l'equipe dont le poste est Director."""
    if credits is None:
        return None
    for member in credits.crew:
        if member.job == "Director":
            return member.name or None
    return None


def _cast(credits: Optional[TMDBCredits]) -> Optional[list[CastMember]]:
    if credits is None:
        return None
    return [
        CastMember(
            name=actor.name,
            character=actor.character or None,
            photo=get_image_url(actor.profile_path, PROFILE_SMALL),
        )
        for actor in credits.cast[:MAX_CAST]
        if actor.name
    ]


def _genre_names(genre_ids: list[int], mapping: dict[int, str]) -> list[str]:
    return [mapping[gid] for gid in genre_ids if gid in mapping]


def _rating_fields(rating: Optional[OfficialRating]) -> dict:
    return {
        "official_rating": rating,
        "expert_age_rec": rating.min_age if rating else None,
    }


# ============================================
# TMDB transformers
# ============================================


def transform_movie(movie: TMDBMovie) -> MediaItem:
    """Film d'une liste TMDB (search, popular, discover)."""
    return MediaItem(
        id=str(movie.id),
        tmdb_id=movie.id,
        type=MediaType.MOVIE,
        title=movie.title or movie.original_title or "",
        original_title=movie.original_title,
        release_date=movie.release_date or None,
        poster_url=get_image_url(movie.poster_path, POSTER_MEDIUM),
        backdrop_url=get_image_url(movie.backdrop_path, BACKDROP_LARGE),
        synopsis_fr=movie.overview or None,
        genres=_genre_names(movie.genre_ids, TMDB_GENRE_MAPPING),
        vote_average=movie.vote_average,
        vote_count=movie.vote_count,
    )


def transform_movie_details(movie: TMDBMovieDetails) -> MediaItem:
    """Fiche film complete avec certification CSA, realisateur et casting."""
    rating = map_certification(get_french_certification(movie.release_dates))
    return MediaItem(
        id=str(movie.id),
        tmdb_id=movie.id,
        type=MediaType.MOVIE,
        title=movie.title or movie.original_title or "",
        original_title=movie.original_title,
        release_date=movie.release_date or None,
        poster_url=get_image_url(movie.poster_path, POSTER_LARGE),
        backdrop_url=get_image_url(movie.backdrop_path, BACKDROP_LARGE),
        synopsis_fr=movie.overview or None,
        genres=[
            genre.name or TMDB_GENRE_MAPPING.get(genre.id, "Inconnu")
            for genre in movie.genres
        ],
        cast=_cast(movie.credits),
        duration=movie.runtime or None,
        director=get_director(movie.credits),
        vote_average=movie.vote_average,
        vote_count=movie.vote_count,
        **_rating_fields(rating),
    )


def transform_tv(show: TMDBTVShow) -> MediaItem:
    """Serie d'une liste TMDB (search, popular)."""
    return MediaItem(
        id=str(show.id),
        tmdb_id=show.id,
        type=MediaType.TV,
        title=show.name or show.original_name or "",
        original_title=show.original_name,
        release_date=show.first_air_date or None,
        poster_url=get_image_url(show.poster_path, POSTER_MEDIUM),
        backdrop_url=get_image_url(show.backdrop_path, BACKDROP_LARGE),
        synopsis_fr=show.overview or None,
        genres=_genre_names(show.genre_ids, TMDB_TV_GENRE_MAPPING),
        vote_average=show.vote_average,
        vote_count=show.vote_count,
    )


def transform_tv_details(show: TMDBTVDetails) -> MediaItem:
    """Fiche serie complete avec classification CSA, chaines et createurs."""
    rating = map_certification(get_tv_french_rating(show.content_ratings))
    return MediaItem(
        id=str(show.id),
        tmdb_id=show.id,
        type=MediaType.TV,
        title=show.name or show.original_name or "",
        original_title=show.original_name,
        release_date=show.first_air_date or None,
        poster_url=get_image_url(show.poster_path, POSTER_LARGE),
        backdrop_url=get_image_url(show.backdrop_path, BACKDROP_LARGE),
        synopsis_fr=show.overview or None,
        genres=[
            genre.name or TMDB_TV_GENRE_MAPPING.get(genre.id, "Inconnu")
            for genre in show.genres
        ],
        cast=_cast(show.credits),
        duration=show.episode_run_time[0] if show.episode_run_time else None,
        number_of_seasons=show.number_of_seasons,
        number_of_episodes=show.number_of_episodes,
        networks=[n.name for n in show.networks if n.name],
        created_by=[c.name for c in show.created_by if c.name],
        vote_average=show.vote_average,
        vote_count=show.vote_count,
        **_rating_fields(rating),
    )


# ============================================
# IGDB
# ============================================


def get_igdb_image_url(image_id: Optional[str], size: str = "medium") -> str:
    """URL d'une image IGDB a partir de son image_id, ou l'image de remplacement."""
    if not image_id:
        return PLACEHOLDER_GAME
    size_key = IGDB_IMAGE_SIZES.get(size, IGDB_IMAGE_SIZES["medium"])
    return f"{IGDB_IMAGE_BASE_URL}/{size_key}/{image_id}.jpg"


def _timestamp_to_date(timestamp: Optional[int]) -> Optional[str]:
    if timestamp is None:
        return None
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).date().isoformat()


def transform_game(game: IGDBGame) -> MediaItem:
    """Jeu IGDB, note totale convertie de 0-100 vers 0-5."""
    rating = pegi_rating(game.age_ratings)
    developer = next(
        (c.company.name for c in game.involved_companies if c.developer and c.company),
        None,
    )
    publisher = next(
        (c.company.name for c in game.involved_companies if c.publisher and c.company),
        None,
    )
    return MediaItem(
        id=str(game.id),
        igdb_id=game.id,
        type=MediaType.GAME,
        title=game.name or "",
        synopsis_fr=game.summary or game.storyline or None,
        poster_url=get_igdb_image_url(game.cover.image_id if game.cover else None),
        release_date=_timestamp_to_date(game.first_release_date),
        genres=[g.name for g in game.genres if g.name],
        platforms=[p.name for p in game.platforms if p.name],
        developer=developer,
        publisher=publisher,
        themes=[t.name for t in game.themes if t.name],
        game_modes=[m.name for m in game.game_modes if m.name],
        vote_average=game.total_rating / 20 if game.total_rating else None,
        vote_count=game.total_rating_count or 0,
        **_rating_fields(rating),
    )


# ============================================
# Google Books
# ============================================

_BOOK_IMAGE_PREFERENCE = {
    "small": ("small_thumbnail", "thumbnail"),
    "medium": ("thumbnail", "small", "medium"),
    "large": ("large", "medium", "small", "thumbnail"),
}

# (mots-cles de categorie, age recommande), testes dans l'ordre
_AGE_HINTS: tuple[tuple[tuple[str, ...], int], ...] = (
    (("bébé", "tout-petit", "0-3"), 2),
    (("maternelle", "3-6", "petite enfance"), 3),
    (("primaire", "6-9", "enfant"), 6),
    (("jeunesse", "jeune", "9-12"), 9),
    (("adolescent", "young adult", "ado"), 12),
)
DEFAULT_BOOK_AGE = 10
MATURE_BOOK_AGE = 16


def get_book_image_url(
    image_links: Optional[GoogleBooksImageLinks],
    size: str = "medium",
) -> str:
    """
    Meilleure image disponible pour la taille demandee.

    Les URLs Google sont passees en https et l'effet "page cornee"
    (&edge=curl) est retire.
    """
    if image_links is None:
        return PLACEHOLDER_BOOK
    for key in _BOOK_IMAGE_PREFERENCE.get(size, _BOOK_IMAGE_PREFERENCE["medium"]):
        url = getattr(image_links, key)
        if url:
            return url.replace("http://", "https://").replace("&edge=curl", "")
    return PLACEHOLDER_BOOK


def estimate_age_recommendation(volume: GoogleBooksVolume) -> int:
    """Age recommande deduit de maturityRating puis des categories."""
    info = volume.volume_info
    if info.maturity_rating == "MATURE":
        return MATURE_BOOK_AGE
    categories = " ".join(info.categories).lower()
    for keywords, age in _AGE_HINTS:
        if any(keyword in categories for keyword in keywords):
            return age
    return DEFAULT_BOOK_AGE


def _isbn(volume: GoogleBooksVolume) -> Optional[str]:
    identifiers = volume.volume_info.industry_identifiers
    for wanted in ("ISBN_13", "ISBN_10"):
        for ident in identifiers:
            if ident.type == wanted and ident.identifier:
                return ident.identifier
    return None


def transform_book(volume: GoogleBooksVolume) -> MediaItem:
    """Livre Google Books (pas de classification officielle en France)."""
    info = volume.volume_info
    title = info.title or ""
    return MediaItem(
        id=volume.id,
        external_id=volume.id,
        type=MediaType.BOOK,
        title=title,
        original_title=f"{title}: {info.subtitle}" if info.subtitle else title,
        synopsis_fr=info.description or None,
        poster_url=get_book_image_url(info.image_links, "medium"),
        release_date=info.published_date or None,
        official_rating=OfficialRating.TOUS_PUBLICS,
        expert_age_rec=estimate_age_recommendation(volume),
        author=", ".join(info.authors) or None,
        publisher=info.publisher or None,
        page_count=info.page_count or None,
        genres=list(info.categories),
        isbn=_isbn(volume),
        language=info.language or "fr",
        vote_average=info.average_rating or None,
        vote_count=info.ratings_count or 0,
        preview_link=info.preview_link or None,
        info_link=info.info_link or None,
    )
