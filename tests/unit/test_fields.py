import pytest

from staffio.exceptions import FieldRejected
from staffio.fields import FloatField, IntField, ListField, ListModelField, StrField
from staffio.fields.base import Field
from staffio.model import BaseModel
from staffio.outcome import Outcome
from staffio.shared import FIELD_REJECTED_EVENT, MODEL_UPDATE_EVENT


class FieldsModel(BaseModel):
    a: IntField = IntField(default=0)
    b: StrField = StrField(default="")


default_model = FieldsModel()


class TestFields:
    def test_base_field_provide_both_defaults(self):
        with pytest.raises(ValueError, match="provided for both"):
            Field(
                type_=str,
                allow_none=False,
                frozen=False,
                default="",
                default_factory=str,
            )

    def test_base_field_missing_defaults(self):
        class BaseFieldModel(BaseModel):
            field = Field(type_=str, allow_none=False, frozen=False)

        with pytest.raises(ValueError, match="default value not"):
            BaseFieldModel()

    @pytest.mark.parametrize("type_check", [True, False])
    @pytest.mark.parametrize(
        "field_type, value",
        [
            (IntField, "a"),
            (IntField, True),
            (StrField, 5),
            (FloatField, "1.0"),
            (FloatField, False),
            (lambda **kwargs: ListField(int, **kwargs), ("a",)),
            (lambda **kwargs: ListModelField(FieldsModel, **kwargs), ("s",)),
        ],
    )
    def test_set_field_invalid_value(self, type_check, field_type, value):
        class Model(BaseModel):
            field = field_type(type_check=type_check)

        if type_check:
            with pytest.raises(TypeError, match="should be of type"):
                Model(field=value)
        else:
            m = Model(field=value)
            assert m.field == (list(value) if isinstance(value, tuple) else value)

    @pytest.mark.parametrize(
        "field_type, items",
        [
            (lambda **kwargs: ListField(int, **kwargs), [1, "a"]),
            (lambda **kwargs: ListModelField(FieldsModel, **kwargs), [object()]),
        ],
    )
    def test_list_field_invalid_item(self, field_type, items):
        class Model(BaseModel):
            field = field_type()

        with pytest.raises(TypeError, match=r"Model.field\[\]"):
            Model(field=items)

    @pytest.mark.parametrize(
        "field_type, default",
        [
            (IntField, 1),
            (StrField, "a"),
            (FloatField, 1.5),
            (lambda default: ListField(int, default_factory=default), lambda: [1, 2]),
            (
                lambda default: ListModelField(FieldsModel, default_factory=default),
                lambda: [default_model],
            ),
        ],
    )
    def test_model_fields_custom_default(self, field_type, default):
        field = field_type(default=default)

        assert field.default == (default() if callable(default) else default)

    @pytest.mark.parametrize("field_type", [IntField, StrField, FloatField])
    def test_default_none_when_allow_none(self, field_type):
        class Model(BaseModel):
            field = field_type(allow_none=True)

        obj = Model()

        assert obj.field is None

    def test_float_field_stores_float(self):
        class Model(BaseModel):
            field = FloatField(default=0)

        obj = Model()
        assert isinstance(obj.field, float)

        obj.field = 3
        assert obj.field == 3.0
        assert isinstance(obj.field, float)

    def test_list_field_default_not_shared(self):
        class Model(BaseModel):
            field = ListField(int)

        first, second = Model(), Model()
        first.field.append(1)

        assert first.field == [1]
        assert second.field == []

    def test_list_field_copies_assigned_sequence(self):
        class Model(BaseModel):
            field = ListField(int)

        values = [1, 2]
        obj = Model(field=values)
        values.append(3)

        assert obj.field == [1, 2]

    def test_frozen_field(self):
        class Model(BaseModel):
            field = StrField(default="", frozen=True)

            def __init__(self, value: str):
                self.field = value

        obj = Model("a")
        assert obj.field == "a"

        with pytest.raises(AttributeError, match="Model.field` is read-only"):
            obj.field = "b"

        assert obj.field == "a"

        with pytest.raises(AttributeError, match="Model.field` is read-only"):
            del obj.field

        assert obj.field == "a"

    def test_delete_field_restores_default(self):
        class Model(BaseModel):
            field = StrField(default="x")

        obj = Model(field="a")
        del obj.field

        assert obj.field == "x"

    def test_setter_signature(self):
        with pytest.raises(ValueError, match="exactly 2"):

            class Model(BaseModel):
                field = IntField(default=0, setter=lambda value: value)

    @pytest.mark.parametrize(
        "setter_type", ["constructor", "decorator", "method_decorator"]
    )
    def test_setter_field_assignment(self, setter_type):
        def setter(model, value):
            assert isinstance(model, BaseModel)
            return value * 2

        if setter_type == "constructor":

            class ModelConstructor(BaseModel):
                field = IntField(default=0, setter=setter)

            model_class = ModelConstructor

        elif setter_type == "decorator":

            class ModelDecorator(BaseModel):
                field = IntField(default=0)

                @field.setter
                def field_setter(self, value):
                    return setter(self, value)

            model_class = ModelDecorator

        else:

            class ModelMethodDecorator(BaseModel):
                field = IntField(default=0)
                field_setter = field.setter(setter)

            model_class = ModelMethodDecorator

        obj = model_class()
        assert obj.field == 0
        obj.field = 2
        assert obj.field == 4

    def test_setter_rejection_keeps_value(self):
        class Model(BaseModel):
            field = IntField(default=20)

            @field.setter
            def field_setter(self, value: int):
                if value < 18:
                    raise FieldRejected("too small")
                return value

        obj = Model()
        rejected = []
        obj.subscribe(FIELD_REJECTED_EVENT, lambda *args: rejected.append(args))

        obj.field = 5

        assert obj.field == 20
        assert len(rejected) == 1
        model, field, outcome = rejected[0]
        assert model is obj
        assert field is Model.field
        assert outcome == Outcome.reject(5, "too small")

    def test_setter_other_exception_propagates(self):
        class Model(BaseModel):
            field = IntField(default=20)

            @field.setter
            def field_setter(self, value: int):
                raise RuntimeError("boom")

        obj = Model()

        with pytest.raises(RuntimeError):
            obj.field = 5

        assert obj.field == 20

    def test_assign_outcome(self):
        class Model(BaseModel):
            field = IntField(default=0)

            @field.setter
            def field_setter(self, value: int):
                if value < 0:
                    raise FieldRejected("negative")
                return value

        obj = Model()

        assert Model.field.assign(obj, 3) == Outcome.accept(3)
        assert Model.field.assign(obj, -1) == Outcome.reject(-1, "negative")
        assert obj.field == 3

    def test_update_event_only_after_construction(self):
        updates = []

        class Model(BaseModel):
            field = IntField(default=0)

            def __init__(self):
                self.subscribe(MODEL_UPDATE_EVENT, lambda *args: updates.append(args))
                self.field = 1

        obj = Model()
        assert updates == []

        obj.field = 2
        assert updates == [(obj, Model.field, 2)]
