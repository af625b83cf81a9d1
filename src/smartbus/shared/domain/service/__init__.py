from .clock import Clock as Clock
from .clock import SystemClock as SystemClock
