"""
Diversity indices for community abundance matrices.

Public API:
    calc_pie(x) -> PIE per site
    calc_ens_pie(x) -> ENS_PIE (inverse Simpson) per site
    rarefy(x, effort) -> expected richness at a reduced number of individuals
    rarefied_richness(comm, n_min) -> RarefiedRichness for every row
    chao1(comm) -> bias-corrected Chao1 richness per site
    pool_by_group(comm, group) -> (levels, pooled abundance matrix)
"""

from pymobr.diversity._pie import calc_pie, calc_ens_pie
from pymobr.diversity._rarefaction import rarefy, rarefied_richness, RarefiedRichness
from pymobr.diversity._chao import chao1
from pymobr.diversity._aggregate import pool_by_group, pool_codes

__all__ = [
    "calc_pie",
    "calc_ens_pie",
    "rarefy",
    "rarefied_richness",
    "RarefiedRichness",
    "chao1",
    "pool_by_group",
    "pool_codes",
]
