import inspect
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from staffio.exceptions import FieldRejected
from staffio.outcome import Outcome

if TYPE_CHECKING:
    from staffio.model import BaseModel


Model_co = TypeVar("Model_co", bound="BaseModel", covariant=True)
T_co = TypeVar("T_co", bound=object, covariant=True)
SubT = TypeVar("SubT")

TypeSpec = Union[Type, Tuple[Type, ...]]


def _type_names(type_: TypeSpec) -> str:
    if isinstance(type_, tuple):
        return " or ".join(t.__name__ for t in type_)
    return type_.__name__


def _check_field_value_type(
    type_: TypeSpec, name: str, value: Any, allow_none: bool = False
):
    if allow_none and value is None:
        return

    # bool is an int subclass, but True is never a meaningful number here
    if isinstance(value, bool) and bool not in _as_tuple(type_):
        raise TypeError(f"Value of `{name}` should be of type {_type_names(type_)}")

    if not isinstance(value, type_):
        raise TypeError(f"Value of `{name}` should be of type {_type_names(type_)}")


def _as_tuple(type_: TypeSpec) -> Tuple[Type, ...]:
    return type_ if isinstance(type_, tuple) else (type_,)


class MISSING:
    pass


SetterType = Callable[[Model_co, T_co], T_co]

# Base fields


class Field(Generic[T_co], object):
    """
    Base type for Fields.

    Fields are data descriptors declared in the body of a BaseModel subclass. The
    value of each field lives in the instance dictionary under the field name and
    is loaded lazily from the field default on first read.
    """

    type_: TypeSpec
    name: str
    init: bool
    allow_none: bool
    frozen: bool
    repr: bool
    type_check: bool

    _default: Optional[T_co]
    _default_factory: Optional[Callable[[], T_co]]
    _setter: Optional[SetterType]

    def __init__(
        self,
        type_: TypeSpec,
        *,
        allow_none: bool,
        frozen: bool,
        init: bool = True,
        default: Union[Optional[T_co], Type[MISSING]] = MISSING,
        default_factory: Union[Optional[Callable[[], T_co]], Type[MISSING]] = MISSING,
        setter: Optional[SetterType] = None,
        repr: bool = True,
        type_check: bool = True,
    ):
        if default is MISSING and default_factory is MISSING:
            if allow_none:
                default = None

        if default is not MISSING and default_factory is not MISSING:
            raise ValueError(
                "Default value for field provided for both `default` and"
                " `default_factory`"
            )

        self.type_ = type_
        self._default = default
        self._default_factory = default_factory
        self.init = init
        self.allow_none = allow_none
        self.frozen = frozen
        self.setter(setter)
        self.repr = repr
        self.type_check = type_check

    def __set_name__(self, owner, name: str):
        self.name = name

    def __set__(self, instance: "BaseModel", value: T_co):
        self.assign(instance, value)

    def __get__(self, instance: "BaseModel", cls=None) -> T_co:
        if instance is None:
            return self

        self._store_default(instance, force=False)

        return instance.__dict__[self.name]

    def __delete__(self, instance: "BaseModel") -> None:
        self._check_frozen(instance)
        del instance.__dict__[self.name]

    def assign(self, instance: "BaseModel", value: T_co) -> Outcome:
        """
        Assigns `value` to the field in `instance`, passing it through the type check
        and the setter. A value refused by the setter leaves the field untouched.

        :param instance: The model instance holding the field.
        :param value: The value to be assigned.
        :raises AttributeError: When the field is frozen and the model is already
                                initialized.
        :raises TypeError: When `value` is not of the field type.
        :return: An accepted Outcome carrying the stored value, or a rejected
                 Outcome carrying `value` and the reason given by the setter.
        """
        self._check_frozen(instance)

        try:
            value = self._check_value(instance, value)
        except FieldRejected as rejection:
            outcome = Outcome.reject(value, str(rejection))
            instance._reject(self, outcome)
            return outcome

        instance.__dict__[self.name] = value

        if instance._initialized:
            instance._update(self, value)

        return Outcome.accept(value)

    def _check_frozen(self, instance: "BaseModel"):
        if self.frozen and instance._initialized:
            raise AttributeError(
                f"Field `{self._field_name(instance)}` is read-only."
            )

    def _store_default(self, instance: "BaseModel", force=False):
        if self.name not in instance.__dict__ or force:
            default = self._convert(self.default)
            instance.__dict__[self.name] = default

    def _check_value(self, instance: "BaseModel", value: T_co) -> T_co:
        if self.type_check:
            _check_field_value_type(
                self.type_,
                self._field_name(instance),
                value,
                allow_none=self.allow_none,
            )
        value = self._convert(value)
        return self._setter(instance, value) if self._setter is not None else value

    def _convert(self, value: Any) -> T_co:
        return value

    @property
    def default(self) -> T_co:
        """
        Extracts the default value of the field.

        :raises ValueError: When no default value has been set during initialization.
        :return: The default value.
        """
        if not self.has_default:
            raise ValueError(
                f"Can't initialize field {self.name}: default value not provided."
            )

        return (
            self._default_factory()  # type: ignore
            if self._default_factory is not MISSING
            else self._default
        )

    @property
    def has_default(self) -> bool:
        """
        Indicates if the field has a default value set during the initialization.

        :return: True if a default value has been set, False otherwise.
        """
        return self._default is not MISSING or self._default_factory is not MISSING

    def setter(self, method: Optional[SetterType]):
        """
        Defines the setter function `method` for the current field. `method` is only
        triggered when a value is assigned to the field through the descriptor
        protocol or `assign`, never for defaults.

        The setter receives the model instance and the (type checked) value, and
        must return the value to be stored. To refuse a value, the setter raises
        FieldRejected: the field then keeps its current value.

        :param method: The method to be called for setting the value. Method should
                       accept exactly 2 parameters.
        :raises ValueError: When the signature of `method` is incorrect.
        :return: The decorated `method`.
        """
        if method is not None:
            signature = inspect.signature(method).parameters
            if len(signature) != 2:
                raise ValueError(
                    f"The provided setter {method.__name__} should accept exactly 2"
                    " parameters."
                )
        self._setter = method
        return method

    def _field_name(self, instance: "BaseModel") -> str:
        return f"{instance.__class__.__name__}.{self.name}"


class IterableField(Field[T_co], Generic[T_co, SubT]):
    sub_type: TypeSpec

    def __init__(
        self,
        type_: TypeSpec,
        sub_type: TypeSpec,
        *,
        frozen: bool,
        init: bool = True,
        default: Union[Optional[T_co], Type[MISSING]] = MISSING,
        default_factory: Union[Optional[Callable[[], T_co]], Type[MISSING]] = MISSING,
        setter: Optional[SetterType] = None,
        repr: bool = True,
        type_check: bool = True,
    ) -> None:
        super().__init__(
            type_=type_,
            init=init,
            default=default,
            default_factory=default_factory,
            allow_none=False,
            frozen=frozen,
            setter=setter,
            repr=repr,
            type_check=type_check,
        )
        self.sub_type = sub_type

    def _check_value(self, instance: "BaseModel", value: T_co) -> T_co:
        if self.type_check:
            _check_field_value_type(self.type_, self._field_name(instance), value)
            for item in value:  # type: ignore
                _check_field_value_type(
                    self.sub_type, f"{self._field_name(instance)}[]", item
                )
        value = self._convert(value)
        return self._setter(instance, value) if self._setter is not None else value
