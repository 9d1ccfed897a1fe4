"""Operations built on top of the core.

This module contains:
- Staging files into the object store and index (add)
- Working tree status
"""

from ggit.operations.stage import AddResult, add_paths
from ggit.operations.status import StatusReport, collect_status

__all__ = ['AddResult', 'add_paths', 'StatusReport', 'collect_status']
