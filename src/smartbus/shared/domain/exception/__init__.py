from .exceptions import (
    BookingValidationException as BookingValidationException,
)
from .exceptions import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exceptions import (
    DomainException as DomainException,
)
from .exceptions import (
    FieldError as FieldError,
)
from .exceptions import (
    InvalidTransitionException as InvalidTransitionException,
)
from .exceptions import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exceptions import (
    SubmissionInProgressException as SubmissionInProgressException,
)
