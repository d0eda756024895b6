"""
Database module initialization.
Exports database components for use throughout the application.
"""

from challenge_tracker.database.base import Base
from challenge_tracker.database.dependencies import (
    get_app_settings,
    get_current_user_id,
    get_db,
)
from challenge_tracker.database.session import (
    check_db_connection,
    create_engine_from_settings,
    create_session_factory,
    get_db_info,
    init_models,
    session_scope,
)

__all__ = [
    # Base classes
    "Base",
    # Engine and sessions
    "create_engine_from_settings",
    "create_session_factory",
    "init_models",
    "session_scope",
    # Dependencies
    "get_app_settings",
    "get_current_user_id",
    "get_db",
    # Utilities
    "check_db_connection",
    "get_db_info",
]
