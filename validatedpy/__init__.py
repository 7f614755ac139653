from .semigroup import (
    Semigroup,
    Monoid,
    ADD,
    STRING,
    LIST,
    TUPLE,
    SUM,
    PRODUCT,
    FIRST,
    LAST,
    MIN,
    MAX,
    joined,
)
from .either import Either, Left, Right
from .errors import ValidationFailure
from .validated import (
    Validated,
    Valid,
    Invalid,
    valid,
    invalid,
    fold,
    is_valid,
    to_either,
    from_either,
    ap,
    map2,
    map_n,
    product,
    tupled,
    merge,
    merge_all,
    empty,
    sequence,
    traverse,
    sequence_accumulating,
    traverse_accumulating,
)
from .checks import cond, from_predicate, from_optional, attempt, validate_all
from .logger import ConsoleLogger, get_logger, configure
