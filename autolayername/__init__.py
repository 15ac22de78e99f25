"""autolayername - automatic layer naming for design-tool scene trees.

Author: Michael Economou
Date: 2026-10-12

Detects whether a layer name was produced by the host editor or by this
package, and rewrites eligible names through pluggable naming strategies.
"""

from autolayername.config import APP_VERSION

__version__ = APP_VERSION
