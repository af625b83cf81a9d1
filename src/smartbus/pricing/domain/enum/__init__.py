from .factor_direction import FactorDirection as FactorDirection
