from tilecrs.crs.options import CRSOptions
from tilecrs.crs.proj_crs import ProjCRS
from tilecrs.crs.scale_table import ScaleTable

__all__ = ["CRSOptions", "ProjCRS", "ScaleTable"]
