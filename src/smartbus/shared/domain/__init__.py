from .entity import Entity as Entity
from .exception import (
    BookingValidationException as BookingValidationException,
)
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    FieldError as FieldError,
)
from .exception import (
    InvalidTransitionException as InvalidTransitionException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exception import (
    SubmissionInProgressException as SubmissionInProgressException,
)
from .repository import Repository as Repository
from .service import (
    Clock as Clock,
)
from .service import (
    SystemClock as SystemClock,
)
from .value_object import (
    ClockTime as ClockTime,
)
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    LocationId as LocationId,
)
from .value_object import (
    Money as Money,
)
from .value_object import (
    SearchCriteria as SearchCriteria,
)
from .value_object import (
    TripId as TripId,
)
