from .pricing_engine import PricingEngine as PricingEngine
from .pricing_rules import DEFAULT_RULES as DEFAULT_RULES
from .pricing_rules import PricingContext as PricingContext
from .pricing_rules import PricingRule as PricingRule
