# -*- coding: utf-8 -*-
"""A name -> class registry for pluggable components."""
from typing import Any, Dict, List, Optional, Type

from sudoku_engine.utils.log import get_logger

logger = get_logger(__name__)


class Registry(object):
    """A registry of named modules.

    Example:
        >>> SOLVERS = Registry("solvers")
        >>> @SOLVERS.register_module("dfs")
        ... class DfsSolver(Solver):
        ...     pass
        >>> SOLVERS.get("dfs")
    """

    def __init__(self, name: str):
        self._name = name
        self._modules: Dict[str, Any] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def modules(self) -> Dict[str, Any]:
        return self._modules

    def list(self) -> List[str]:
        """Names of all registered modules, in registration order."""
        return list(self._modules.keys())

    def get(self, module_key: str) -> Optional[Any]:
        """Return the module registered under `module_key`, or None."""
        return self._modules.get(module_key, None)

    def _register_module(
        self, module_name: Optional[str] = None, module_cls: Type = None, force: bool = False
    ) -> None:
        if module_name is None:
            module_name = module_cls.__name__
        if module_name in self._modules and not force:
            raise KeyError(f"{module_name} is already registered in {self._name}")
        self._modules[module_name] = module_cls
        module_cls._name = module_name
        logger.debug(f"Registered `{module_name}` in registry `{self._name}`.")

    def register_module(self, module_name: str, module_cls: Type = None, force: bool = False):
        """Register a module, either directly or as a class decorator.

        Args:
            module_name (str): The key the module is registered under.
            module_cls (Type): The module to register; omit to use as a decorator.
            force (bool): Overwrite an existing registration with the same name.
        """
        if not (module_name is None or isinstance(module_name, str)):
            raise TypeError(f"module_name must be either of None, str, got {type(module_name)}")
        if module_cls is not None:
            self._register_module(module_name=module_name, module_cls=module_cls, force=force)
            return module_cls

        def _register(module_cls):
            self._register_module(module_name=module_name, module_cls=module_cls, force=force)
            return module_cls

        return _register
