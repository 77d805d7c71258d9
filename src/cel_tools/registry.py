"""
Registry pattern utility.

Frame decoders register themselves under the
:py:class:`~cel_tools.constants.Encoding` they handle::

    DECODERS, register = new_registry(attribute='encoding')

    @register(Encoding.FLAT)
    def decode(ctx):
        ...

    width = DECODERS[Encoding.FLAT](ctx)
"""

from typing import Any, Callable, Tuple, TypeVar, Union

T = TypeVar("T")


def new_registry(attribute: Union[str, None] = None) -> Tuple[dict, Callable]:
    """
    Returns an empty dict and a @register decorator.

    :param attribute: Optional attribute name to set on registered objects.
                     The key will be stored as this attribute on the object.
    :return: Tuple of (registry_dict, register_decorator)
    """
    registry = {}

    def register(key: Any) -> Callable[[Callable[..., T]], Callable[..., T]]:
        def decorator(func: Callable[..., T]) -> Callable[..., T]:
            registry[key] = func
            if attribute:
                setattr(func, attribute, key)
            return func

        return decorator

    return registry, register
