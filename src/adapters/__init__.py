"""
Couche adaptateurs (infrastructure).

Les adaptateurs implementent les ports definis dans core/ports/ et fournissent
des implementations concretes pour les systemes externes.

Sous-packages :
- api/ : Clients API externes (TMDB, IGDB, Google Books)

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""
