from __future__ import annotations

import logging
from reprlib import Repr
from typing import Any, Callable, Dict, List, Tuple, Type

from staffio.event import EventListener
from staffio.fields.base import Field, T_co
from staffio.outcome import Outcome
from staffio.shared import (
    FIELD_REJECTED_EVENT,
    MODEL_INSTANTIATED_EVENT,
    MODEL_UPDATE_EVENT,
)

logger = logging.getLogger(__name__)


class ModelMeta:
    __slots__ = ("init", "init_ignore_extra", "repr", "fields")

    init: bool
    init_ignore_extra: bool
    repr: bool
    fields: Dict[str, Field]

    def __init__(self):
        self.init = True
        self.init_ignore_extra = True
        self.repr = True
        self.fields = dict()


# Read-only meta attributes, can't be modified by model class
__MODEL_META_READONLY__ = ("fields",)


class BaseModelMeta(type):
    """
    BaseModel metaclass. Responsible to internally cache the data schema in a BaseModel
    subclass by identifying its fields, including the ones inherited from parent
    models, and reading the options of an optional nested `Meta` class.
    """

    def __new__(cls, name: str, bases: Tuple[Type, ...], dct: Dict[str, Any]):
        meta = ModelMeta()
        dct["_meta"] = meta

        def _update_meta(_meta: Any, extend: bool):
            if not _meta:
                return

            propagate_meta = set(meta.__slots__) - set(__MODEL_META_READONLY__)

            for meta_attribute in propagate_meta:
                if not hasattr(_meta, meta_attribute):
                    continue

                setattr(meta, meta_attribute, getattr(_meta, meta_attribute))

            # excluded meta, needs to be propagated manually
            if extend:
                meta.fields.update(_meta.fields)

        for base in bases:
            if not hasattr(base, "_meta"):
                continue

            _update_meta(base._meta, True)

        _update_meta(dct.get("Meta", None), False)

        for field_name, field_value in dct.items():
            if isinstance(field_value, Field):
                meta.fields[field_name] = field_value

        return super().__new__(cls, name, bases, dct)

    def __call__(self, *args, **kwargs):
        instance: BaseModel = super().__call__(*args, **kwargs)

        # stores the default after the constructor, if nothing has been set yet
        # this is implemented here so that this is always called, regardless of the
        # models with custom constructors calling or not super().__init__()
        for field in instance._meta.fields.values():
            field._store_default(instance, force=False)

        instance._initialized = True
        instance._listener.dispatch(MODEL_INSTANTIATED_EVENT, instance)

        return instance


_repr_obj: Repr = Repr()
_repr_obj.maxother = 200


class BaseModel(metaclass=BaseModelMeta):
    """
    A record made of validated fields.

    BaseModel should be extended with Field descriptors declared in the class body.
    The metaclass collects them into `_meta.fields`, and the default constructor
    matches keyword arguments to field names. Models with a custom constructor
    assign their fields directly; fields left unassigned receive their defaults
    once the constructor returns.

    Every assignment goes through the field type check and the field setter. Values
    refused by a setter are reported through `_reject`: the model logs a warning and
    dispatches FIELD_REJECTED_EVENT on its listener, and the field keeps its value.
    Accepted changes made after construction dispatch MODEL_UPDATE_EVENT.

    The listener is created before the constructor runs, so rejections raised while
    constructing are dispatched as well. Subclasses may swap it for a shared
    listener at the top of their constructor.
    """

    # these are all initialized by the metaclass
    _meta: ModelMeta

    _initialized: bool = False
    _listener: EventListener

    def __new__(cls, *args, **kwargs):
        instance = super().__new__(cls)
        instance._listener = EventListener()
        return instance

    def __init__(self, **kwargs: T_co):
        """
        Instantiates the model by matching `kwargs` parameters to field names.
        Behavior is disabled when init=False in the model Meta class.

        :param kwargs: The dictionary of keyword arguments matching the field names of
                       the model class.
        :raises ValueError: When invalid arguments are provided.
        """
        meta = self._meta

        if not meta.init:
            return

        for arg_name, value in kwargs.items():
            field_object = meta.fields.get(arg_name, None)

            if not field_object:
                if not meta.init_ignore_extra:
                    raise ValueError(
                        "Invalid argument provided to constructor of"
                        f" `{self.__class__.__name__}`: {arg_name}"
                    )
                continue

            if not field_object.init:
                if not meta.init_ignore_extra:
                    raise ValueError(f"Attribute `{arg_name}` cannot be initialized.")
                continue

            field_object.assign(self, value)

    @property
    def fields(self) -> Dict[str, Any]:
        """
        Returns the values of each field in the model instance.

        :return: A dict with keys containing the string names of the fields,
                 and values containing the value of the corresponding field.
        """
        return {k: getattr(self, k) for k in self._filter_fields(lambda v: True)}

    def subscribe(self, event: str, method: Callable[..., Any]):
        self._listener.subscribe(event, method)

    def unsubscribe(self, event: str, method: Callable[..., Any]):
        self._listener.unsubscribe(event, method)

    def _filter_fields(self, filt: Callable[[Field], bool]):
        return {k: v for k, v in self._meta.fields.items() if filt(v)}

    def _update(self, field: Field[T_co], value: T_co):
        logger.debug("%s: %s set to %r", self, field.name, value)
        self._listener.dispatch(MODEL_UPDATE_EVENT, self, field, value)

    def _reject(self, field: Field[T_co], outcome: Outcome):
        logger.warning(
            "%s: rejected %s=%r (%s), keeping %r",
            self,
            field.name,
            outcome.value,
            outcome.reason,
            field.__get__(self),
        )
        self._listener.dispatch(FIELD_REJECTED_EVENT, self, field, outcome)

    def __repr__(self) -> str:
        if not self._meta.repr:
            return super().__repr__()

        def get_field_repr(field: str):
            value = getattr(self, field)
            return f"{field}={_repr_obj.repr(value)}"

        repr_args: List[str] = [
            get_field_repr(n) for n in self._filter_fields(lambda x: x.repr)
        ]
        return f"{self.__class__.__name__}({', '.join(repr_args)})"
