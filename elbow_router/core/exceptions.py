"""
Custom exceptions for elbow_router
"""


class ElbowRouterError(Exception):
    """Base exception for all elbow_router errors"""
    pass


class ConfigError(ElbowRouterError):
    """Raised when a configuration file is missing or invalid"""
    pass


class SceneError(ElbowRouterError):
    """Raised when a scene file or diagram reference is invalid"""
    pass


class CommandError(ElbowRouterError):
    """Raised when a command cannot be built or applied"""
    pass
