from .claims import (
    Claim,
    ClaimParser,
    check,
    check_any,
    check_any_text,
    check_text,
    direct_child,
    direct_child_text,
    direct_descendant,
    direct_descendant_text,
    exact,
    exact_text,
    filter_direct_children,
    filter_direct_children_text,
    filter_direct_descendants,
    filter_direct_descendants_text,
    has_access,
    held_claims,
    is_valid,
    parse,
    parse_many,
    visible_children,
    visible_descendants,
)
from .config import ClaimConfig, LogLevel, load_config_from_env
from .exceptions import ClaimError, ClaimSyntaxError, ConfigurationError
from .logging import ClaimFormatter, safe_preview, setup_logging

__version__ = "0.1.0"

__all__ = [
    'Claim',
    'ClaimParser',
    'check',
    'check_any',
    'check_any_text',
    'check_text',
    'direct_child',
    'direct_child_text',
    'direct_descendant',
    'direct_descendant_text',
    'exact',
    'exact_text',
    'filter_direct_children',
    'filter_direct_children_text',
    'filter_direct_descendants',
    'filter_direct_descendants_text',
    'has_access',
    'held_claims',
    'is_valid',
    'parse',
    'parse_many',
    'visible_children',
    'visible_descendants',
    'ClaimConfig',
    'LogLevel',
    'load_config_from_env',
    'ClaimError',
    'ClaimSyntaxError',
    'ConfigurationError',
    'ClaimFormatter',
    'safe_preview',
    'setup_logging',
]
