"""Load and validate build configuration for simple-ssg.

Settings come from three layers, highest precedence first: explicit arguments
(the CLI and ``SIMPLE_SSG_*`` environment variables), an optional
``simple-ssg.yaml`` file, and built-in defaults. :func:`load_build_config`
merges them into a :class:`BuildConfig` that the generator consumes.

Examples
--------
>>> from pathlib import Path
>>> from simple_ssg.config import load_build_config
>>> config = load_build_config(Path("simple-ssg.yaml"))  # doctest: +SKIP
>>> config.strict  # doctest: +SKIP
False
"""

from .loader import load_build_config
from .models import BuildConfig, BuiltInTemplate, SiteConfigError

__all__ = ["BuildConfig", "BuiltInTemplate", "SiteConfigError", "load_build_config"]
