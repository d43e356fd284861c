"""
Definition of the rule interface that every masking rule must implement.
"""

from abc import ABC, abstractmethod
from typing import Any


class MaskRuleI(ABC):
    """
    Abstract base class for all masking rules.

    A rule decides whether it handles the runtime kind of a value
    (:meth:`matches`) and, if so, which default value replaces it
    (:meth:`default`).
    """

    @abstractmethod
    def matches(self, value: Any) -> bool:
        """
        Return ``True`` if this rule handles the runtime kind of *value*.
        """
        raise NotImplementedError

    @abstractmethod
    def default(self, value: Any) -> Any:
        """
        Return the masked replacement of *value*.

        Parameters
        ----------
        value: Any
            The original value, already accepted by :meth:`matches`.

        Returns
        -------
        Any
            The default (zero) value of the same kind.
        """
        raise NotImplementedError
