"""
Mock Google Books API responses for testing.

GET /volumes?q=... returns {kind, totalItems, items}; GET /volumes/{id}
returns a single volume. Keys are camelCase as served by Google.
"""

GOOGLE_BOOKS_VOLUME = {
    "kind": "books#volume",
    "id": "zyTCAlFPjgYC",
    "volumeInfo": {
        "title": "Le Petit Prince",
        "subtitle": "Avec des aquarelles de l'auteur",
        "authors": ["Antoine de Saint-Exupéry"],
        "publisher": "Gallimard Jeunesse",
        "publishedDate": "1999-10-01",
        "description": "J'ai ainsi vécu seul, sans personne avec qui parler véritablement...",
        "industryIdentifiers": [
            {"type": "ISBN_10", "identifier": "2070612759"},
            {"type": "ISBN_13", "identifier": "9782070612758"},
        ],
        "pageCount": 96,
        "categories": ["Jeunesse"],
        "averageRating": 4.5,
        "ratingsCount": 120,
        "maturityRating": "NOT_MATURE",
        "imageLinks": {
            "smallThumbnail": "http://books.google.com/books/content?id=zyTCAlFPjgYC&zoom=5&edge=curl",
            "thumbnail": "http://books.google.com/books/content?id=zyTCAlFPjgYC&zoom=1&edge=curl",
        },
        "language": "fr",
        "previewLink": "http://books.google.fr/books?id=zyTCAlFPjgYC",
        "infoLink": "http://books.google.fr/books?id=zyTCAlFPjgYC&source=gbs_api",
    },
}

GOOGLE_BOOKS_MINIMAL_VOLUME = {
    "kind": "books#volume",
    "id": "abc-_123",
    "volumeInfo": {"title": "Sans couverture"},
}

GOOGLE_BOOKS_SEARCH_RESPONSE = {
    "kind": "books#volumes",
    "totalItems": 45,
    "items": [GOOGLE_BOOKS_VOLUME, GOOGLE_BOOKS_MINIMAL_VOLUME],
}

# Google omits "items" when nothing matches
GOOGLE_BOOKS_EMPTY_RESPONSE = {
    "kind": "books#volumes",
    "totalItems": 0,
}
