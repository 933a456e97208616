"""
Couche domaine (core).

Contient les entites, ports (interfaces abstraites), objets valeur,
la taxonomie d'erreurs et le nettoyage des entrees.
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, frameworks web).

Sous-packages :
- entities/ : DTO canonique MediaItem et PagedResult
- ports/ : Interfaces des catalogues externes
- value_objects/ : Classifications officielles par age
"""
