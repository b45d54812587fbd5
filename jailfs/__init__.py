"""jailfs package: a Unix-shell-like browser jailed inside a fixed root directory.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
