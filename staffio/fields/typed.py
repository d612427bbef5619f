from typing import Any, Callable, List, Optional, Type, Union

from staffio.fields.base import (
    MISSING,
    Field,
    IterableField,
    Model_co,
    SetterType,
    SubT,
)

# Constructors are mostly copy-pasted in this file so autocompletion support is more
# user friendly in any IDE


class IntField(Field[int]):
    def __init__(
        self,
        *,
        init: bool = True,
        default: Union[Optional[int], Type[MISSING]] = MISSING,
        default_factory: Union[Optional[Callable[[], int]], Type[MISSING]] = MISSING,
        allow_none: bool = False,
        frozen: bool = False,
        setter: Optional[SetterType] = None,
        repr: bool = True,
        type_check: bool = True,
    ) -> None:
        super().__init__(
            type_=int,
            init=init,
            default=default,
            default_factory=default_factory,
            allow_none=allow_none,
            frozen=frozen,
            setter=setter,
            repr=repr,
            type_check=type_check,
        )


class StrField(Field[str]):
    def __init__(
        self,
        *,
        init: bool = True,
        default: Union[Optional[str], Type[MISSING]] = MISSING,
        default_factory: Union[Optional[Callable[[], str]], Type[MISSING]] = MISSING,
        allow_none: bool = False,
        frozen: bool = False,
        setter: Optional[SetterType] = None,
        repr: bool = True,
        type_check: bool = True,
    ) -> None:
        super().__init__(
            type_=str,
            init=init,
            default=default,
            default_factory=default_factory,
            allow_none=allow_none,
            frozen=frozen,
            setter=setter,
            repr=repr,
            type_check=type_check,
        )


class FloatField(Field[float]):
    """
    Accepts ints as well as floats and always stores a float.
    """

    def __init__(
        self,
        *,
        init: bool = True,
        default: Union[Optional[float], Type[MISSING]] = MISSING,
        default_factory: Union[Optional[Callable[[], float]], Type[MISSING]] = MISSING,
        allow_none: bool = False,
        frozen: bool = False,
        setter: Optional[SetterType] = None,
        repr: bool = True,
        type_check: bool = True,
    ) -> None:
        super().__init__(
            type_=(float, int),
            init=init,
            default=default,
            default_factory=default_factory,
            allow_none=allow_none,
            frozen=frozen,
            setter=setter,
            repr=repr,
            type_check=type_check,
        )

    def _convert(self, value: Any) -> float:
        if value is None or not isinstance(value, (int, float)):
            return value
        return float(value)


class ListField(IterableField[List[SubT], SubT]):
    """
    Ordered, mutable sequence of values. Assigned sequences are copied into a new
    list, the stored list itself can be mutated in place.
    """

    def __init__(
        self,
        sub_type: Type[SubT],
        *,
        init: bool = True,
        default_factory: Union[
            Optional[Callable[[], List[SubT]]], Type[MISSING]
        ] = list,
        frozen: bool = False,
        setter: Optional[SetterType] = None,
        repr: bool = True,
        type_check: bool = True,
    ) -> None:
        super().__init__(
            type_=list,
            sub_type=sub_type,
            init=init,
            default_factory=default_factory,
            frozen=frozen,
            setter=setter,
            repr=repr,
            type_check=type_check,
        )

    def _convert(self, value: Any) -> List[SubT]:
        return list(value)


class ListModelField(ListField[Model_co]):
    def __init__(
        self,
        model_type: Type[Model_co],
        *,
        init: bool = True,
        default_factory: Union[
            Optional[Callable[[], List[Model_co]]], Type[MISSING]
        ] = list,
        frozen: bool = False,
        setter: Optional[SetterType] = None,
        repr: bool = True,
        type_check: bool = True,
    ) -> None:
        super().__init__(
            sub_type=model_type,
            init=init,
            default_factory=default_factory,
            frozen=frozen,
            setter=setter,
            repr=repr,
            type_check=type_check,
        )
