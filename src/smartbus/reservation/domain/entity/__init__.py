from .confirmation import Confirmation as Confirmation
