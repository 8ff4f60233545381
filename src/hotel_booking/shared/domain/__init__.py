from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    InvalidDateRangeException as InvalidDateRangeException,
)
from .repository import Repository as Repository
from .value_object import DateRange as DateRange
