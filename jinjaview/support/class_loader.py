"""
Class Loader
Dynamic class loading utility for importing classes from dotted paths
"""
import importlib
from typing import Optional, Type


class ClassLoader:
    """
    Utility for dynamically loading classes from string paths

    Example:
        cls = ClassLoader.load('app.view.cell.inbox_cell.InboxCell')
        cls = ClassLoader.try_load('app.view.helper.html_helper.HtmlHelper')
    """

    @staticmethod
    def load(class_path: str) -> Type:
        """
        Load a class from a dotted path string

        Raises:
            ImportError: If module cannot be imported
            AttributeError: If class doesn't exist in module
        """
        module_path, class_name = class_path.rsplit('.', 1)
        module = importlib.import_module(module_path)
        return getattr(module, class_name)

    @staticmethod
    def try_load(class_path: str) -> Optional[Type]:
        """
        Load a class by convention, returning None when its module is absent

        Only a missing module (or a missing attribute) is treated as absent;
        errors raised while importing an existing module propagate.
        """
        module_path, class_name = class_path.rsplit('.', 1)
        try:
            module = importlib.import_module(module_path)
        except ModuleNotFoundError as e:
            # Only swallow "this module does not exist", not broken imports inside it
            if e.name and module_path.startswith(e.name):
                return None
            raise
        return getattr(module, class_name, None)
