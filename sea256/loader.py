"""
Resolve the hash function under test.

A locator is a name in HASH_FUNCTIONS, a path to a ``.py`` file, or an
importable module name, optionally suffixed with ``:attr``. Module names are
looked up in the current directory first. Without an explicit export name
the module's ``default`` attribute is used, then ``hash``.
"""

import importlib
import importlib.util
import logging
import os
import sys

from .sea256 import sea256_raw

logger = logging.getLogger(__name__)

HASH_FUNCTIONS = {
    'sea256': sea256_raw,
}

FALLBACK_EXPORTS = ('default', 'hash')


class LoaderError(Exception):
    """Base class for hash function resolution failures."""


class ModuleResolutionError(LoaderError):
    pass


class ExportNotFoundError(LoaderError):
    pass


def _export_from_module(module, export):
    if export is not None:
        if not hasattr(module, export):
            raise ExportNotFoundError(f'Hash function "{export}" is not exported by {module.__name__}')
        fn = getattr(module, export)
        if not callable(fn):
            raise ExportNotFoundError(f'Export "{export}" of {module.__name__} is not callable')
        return fn

    for name in FALLBACK_EXPORTS:
        fn = getattr(module, name, None)
        if callable(fn):
            return fn
    raise ExportNotFoundError(
        f"Failed to resolve a hash function from {module.__name__} "
        f"(tried {', '.join(FALLBACK_EXPORTS)})")


def _split_locator(locator):
    base, sep, attr = locator.rpartition(':')
    if sep and attr.isidentifier():
        return base, attr
    return locator, None


def _is_path(locator):
    return locator.endswith('.py') or '/' in locator or os.sep in locator


def _load_from_file(locator):
    path = os.path.abspath(locator)
    if not os.path.isfile(path):
        raise ModuleResolutionError(f'Hash module file "{locator}" does not exist')
    name = '_sea256_hash_' + os.path.splitext(os.path.basename(path))[0]
    spec = importlib.util.spec_from_file_location(name, path)
    if spec is None or spec.loader is None:
        raise ModuleResolutionError(f'Cannot load hash module file "{locator}"')
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(name, None)
        raise ModuleResolutionError(f'Failed to execute hash module "{locator}": {e}') from e
    return module


def _import_from_cwd_first(module_name):
    cwd = os.getcwd()
    added = cwd not in sys.path
    if added:
        sys.path.insert(0, cwd)
    try:
        return importlib.import_module(module_name)
    except Exception as e:
        raise ModuleResolutionError(f'Cannot import hash module "{module_name}": {e}') from e
    finally:
        if added:
            sys.path.remove(cwd)


def resolve_hash_function(locator, export=None):
    """Return a ``(bytes, bytes) -> bytes`` callable for locator."""
    if export is None and locator in HASH_FUNCTIONS:
        logger.debug("using built-in hash function %s", locator)
        return HASH_FUNCTIONS[locator]

    module_name, attr = _split_locator(locator)
    if attr and export is None:
        export = attr
    if not module_name:
        raise ModuleResolutionError("Empty hash module locator")

    if _is_path(module_name):
        module = _load_from_file(module_name)
    elif module_name.startswith('.'):
        raise ModuleResolutionError(f'Relative module name "{module_name}" is not supported')
    else:
        module = _import_from_cwd_first(module_name)

    fn = _export_from_module(module, export)
    logger.debug("resolved hash function %s from %s", getattr(fn, '__name__', fn), module_name)
    return fn
