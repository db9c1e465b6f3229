"""ContextVar-based compile configuration for patchmark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Compiler instance and read by every stage of the
pipeline running in that context.

Usage:
    # In Compiler class
    compiler = Compiler(CompileConfig(show_syntax=True))
    result = compiler.compile_text("# Hello", {})  # Sets config internally

    # Module-level functions read whatever is active
    from patchmark.config import CompileConfig, compile_config_context

    with compile_config_context(CompileConfig(list_items_enabled=False)):
        result = compile_text("- not a list item", {})

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CompileConfig:
    """Immutable compile configuration.

    Attributes:
        list_items_enabled: Classify "- ", "* ", "+ " and "1. " blocks as list items
        show_syntax: Keep markup markers ("# ", "**", ...) inside the compiled tags
        wrapper_tag: Tag of the per-block wrapper node that carries data-text

    """

    list_items_enabled: bool = True
    show_syntax: bool = False
    wrapper_tag: str = "div"

    @classmethod
    def from_dict(cls, config_dict: dict) -> "CompileConfig":
        """Create CompileConfig from dictionary.

        Only includes keys that are valid CompileConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = CompileConfig.from_dict({"show_syntax": True, "theme": "dark"})
            >>> config.show_syntax
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: CompileConfig = CompileConfig()

_compile_config: ContextVar[CompileConfig] = ContextVar(
    "compile_config",
    default=_DEFAULT_CONFIG,
)


def get_compile_config() -> CompileConfig:
    """Get current compile configuration (thread-local)."""
    return _compile_config.get()


def set_compile_config(config: CompileConfig) -> None:
    """Set compile configuration for current context.

    Args:
        config: CompileConfig instance to use for this context.

    """
    _compile_config.set(config)


def reset_compile_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _compile_config.set(_DEFAULT_CONFIG)


@contextmanager
def compile_config_context(config: CompileConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores the previous config even if an exception is raised.

    Example:
        >>> with compile_config_context(CompileConfig(show_syntax=True)):
        ...     node = compile_paragraph("**a**", {})
        >>> # Automatically reset to previous config

    """
    previous = _compile_config.get()
    _compile_config.set(config)
    try:
        yield
    finally:
        _compile_config.set(previous)


__all__ = [
    "CompileConfig",
    "compile_config_context",
    "get_compile_config",
    "reset_compile_config",
    "set_compile_config",
]
