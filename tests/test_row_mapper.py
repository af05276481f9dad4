from dataclasses import dataclass

from app.models.user import User
from system.db.row_mapper import RowMapper, key_value


@dataclass
class Point:
    id: int
    label: str


class Plain:
    def __init__(self, **kw):
        self.__dict__.update(kw)


def test_no_target_keeps_dict_copy():
    row = {"id": 1}
    out = RowMapper().map_row(row)
    assert out == row and out is not row


def test_dataclass_target_uses_declared_fields_only():
    out = RowMapper(Point).map_rows([{"id": 1, "label": "a", "extra": True}])
    assert out == [Point(id=1, label="a")]


def test_callable_target_gets_all_columns():
    out = RowMapper(Plain).map_row({"id": 3, "x": 9})
    assert out.id == 3 and out.x == 9


def test_model_target_and_value_for():
    user = RowMapper(User).map_row({"id": 7, "name": "Ana", "unknown": "x"})

    assert isinstance(user, User)
    assert user.value_for("name") == "Ana"
    assert user.email is None
    assert not hasattr(user, "unknown")


def test_fields_are_resolved_once():
    RowMapper.clear_cache()
    first = RowMapper.fields_for(Point)
    assert RowMapper._FIELDS_CACHE[Point] == ("id", "label")
    assert RowMapper.fields_for(Point) is first
    assert RowMapper.fields_for(User) == User.__fields__
    assert RowMapper.fields_for(Plain) is None


def test_key_value_by_name_and_qualified_name():
    row = {"id": 5, "name": "Boris"}
    assert key_value(row, "id") == 5
    assert key_value(row, "u.id") == 5

    user = User(id=8, name="Ceca")
    assert key_value(user, "id") == 8
    assert key_value(user, "users.id") == 8

    assert key_value(Point(2, "p"), "p.label") == "p"
    assert key_value(Point(2, "p"), "missing") is None
