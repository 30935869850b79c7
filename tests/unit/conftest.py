import pytest
import sys
from pathlib import Path

# Repository root, so that `src` and `tests.fixtures` are importable
root_path = str(Path(__file__).parent.parent.parent)
if root_path not in sys.path:
    sys.path.insert(0, root_path)

from src.modules.scanner import MemberInspector, StaticIntrospector, ModuleIntrospector
from src.modules.versions import VersionRegistry
from tests.utils.test_logger import create_test_logger


@pytest.fixture
def logger():
    """Logger capturing everything that is logged."""
    return create_test_logger()


@pytest.fixture
def module_introspector(logger):
    return ModuleIntrospector(logger)


@pytest.fixture
def inspector(module_introspector, logger):
    return MemberInspector(module_introspector, logger)


@pytest.fixture
def registry(logger):
    return VersionRegistry(logger)
