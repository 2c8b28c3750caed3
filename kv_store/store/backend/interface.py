"""
This module contains an interface for the definition of the mapping
that backs a `Store`.
"""

from typing import Optional
import abc


class KeyValueStore(metaclass=abc.ABCMeta):
    """
    Interface for unguarded key-value mappings. Implementations do not
    need to be thread-safe; the `Store` serializes all access.

    # Implementation guide
    A new `KeyValueStore`-type can inherit most requirements directly
    from this class. Below are the requirements imposed by the
    interface.

    ## Required definitions
    * `_write` specifies how a value is written into the store
    * `_read` specifies how a value is retrieved from the store
      (should return `None` for unknown keys)
    * `_delete` specifies how key-value pairs are removed from the store
      (should not fail for unknown keys)
    * `keys` specifies how information regarding available keys can be
      generated

    ## Optional definitions
    * `_clear` specifies how all records are removed at once
      (default deletes key by key)
    * `_SUPPORTED_TYPES` specifies what value types are supported
    """
    @classmethod
    def __subclasshook__(cls, subclass):
        return (
            hasattr(subclass, "_write")
            and hasattr(subclass, "_read")
            and hasattr(subclass, "_delete")
            and hasattr(subclass, "keys")
            and callable(subclass._write)
            and callable(subclass._read)
            and callable(subclass._delete)
            and callable(subclass.keys)
            or NotImplemented
        )

    _SUPPORTED_TYPES: tuple[type, ...] = (str, )

    @abc.abstractmethod
    def _write(self, key: str, value: str) -> None:
        """
        Writes `value` for a given `key`.
        """
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method '_write'."
        )

    @abc.abstractmethod
    def _read(self, key: str) -> Optional[str]:
        """
        Returns the value for a given `key` or `None`.
        """
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method '_read'."
        )

    @abc.abstractmethod
    def _delete(self, key: str) -> None:
        """Deletes the record for `key`."""
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method '_delete'."
        )

    @abc.abstractmethod
    def keys(self) -> tuple[str, ...]:
        """
        Returns a tuple of `key`s in the store.
        """
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method 'keys'."
        )

    def _clear(self) -> None:
        for key in self.keys():
            self._delete(key)

    def write(self, key: str, value: str) -> None:
        """
        Write `value` for a given `key`.

        Raises `TypeError` if the type of `key` or `value` is not
        supported.
        """
        if not isinstance(key, str):
            raise TypeError(
                f"{self.__class__.__name__} only supports keys of type str "
                + f"but got {key.__class__.__name__}."
            )
        if not isinstance(value, self._SUPPORTED_TYPES):
            raise TypeError(
                f"{self.__class__.__name__} does not support "
                + f"{value.__class__.__name__} but only "
                + f"{', '.join(map(lambda x: x.__name__, self._SUPPORTED_TYPES))}."
            )
        self._write(key, value)

    def read(self, key: str) -> Optional[str]:
        """
        Retrieve the value for a given `key`.
        """
        return self._read(key)

    def delete(self, key: str) -> None:
        """Deletes the record for `key`."""
        self._delete(key)

    def clear(self) -> None:
        """Deletes all records."""
        self._clear()
