import pytest

from system.db.query import ClauseConfig, DBError, InvalidArgumentError
from system.db.query_builder import QueryBuilder


def _base():
    return (
        QueryBuilder("users")
        .select("id", "name")
        .where("age > ?", 18)
        .join("INNER JOIN profiles p ON p.user_id = users.id")
        .order_by("name ASC")
        .limit(10)
    )


MUTATIONS = [
    ("select", lambda q: q.select("email")),
    ("where", lambda q: q.where("status = ?", "active")),
    ("order_by", lambda q: q.order_by("id DESC")),
    ("limit", lambda q: q.limit(50)),
    ("offset", lambda q: q.offset(20)),
    ("join", lambda q: q.join("LEFT JOIN teams t ON t.id = p.team_id")),
    ("group_by", lambda q: q.group_by("dept")),
    ("having", lambda q: q.having("COUNT(*) > 3")),
    ("for_update", lambda q: q.for_update()),
]


@pytest.mark.parametrize("name,mutate", MUTATIONS, ids=[m[0] for m in MUTATIONS])
def test_mutator_returns_new_builder_and_keeps_base(name, mutate):
    base = _base()
    before = base.config

    derived = mutate(base)

    assert derived is not base
    assert derived.config != before
    assert base.config == before
    assert base.to_sql() == ("SELECT id, name FROM users INNER JOIN profiles p ON p.user_id = users.id "
                             "WHERE age > ? ORDER BY name ASC LIMIT 10", [18])


def test_sibling_builders_do_not_see_each_other():
    base = _base()

    a = base.join("LEFT JOIN a ON a.id = users.a_id").where("x = ?", 1)
    b = base.join("LEFT JOIN b ON b.id = users.b_id").where("y = ?", 2)

    assert a.config.join_clauses[-1].startswith("LEFT JOIN a")
    assert b.config.join_clauses[-1].startswith("LEFT JOIN b")
    assert len(base.config.join_clauses) == 1
    assert a.args == (1,)
    assert b.args == (2,)
    assert base.args == (18,)


def test_config_sequences_are_tuples():
    q = _base()
    assert isinstance(q.config.select_fields, tuple)
    assert isinstance(q.config.join_clauses, tuple)
    assert isinstance(q.config.args, tuple)


def test_where_replaces_previous_fragment_and_args():
    q = QueryBuilder("users").where("age > ?", 18).where("status = ? AND dept = ?", "active", "eng")

    assert q.config.where_clause == "status = ? AND dept = ?"
    assert q.args == ("active", "eng")


def test_join_appends_in_call_order():
    q = QueryBuilder("users").join("JOIN a ON 1=1").join("JOIN b ON 1=1").join("JOIN c ON 1=1")
    assert q.config.join_clauses == ("JOIN a ON 1=1", "JOIN b ON 1=1", "JOIN c ON 1=1")


def test_select_without_fields_means_star():
    q = QueryBuilder("users").select("id").select()
    assert q.config.select_fields == ()
    assert q.to_sql()[0] == "SELECT * FROM users"


@pytest.mark.parametrize("method", ["limit", "offset"])
def test_negative_limit_and_offset_rejected(method):
    with pytest.raises(InvalidArgumentError):
        getattr(QueryBuilder("users"), method)(-1)


def test_builder_from_existing_config():
    cfg = ClauseConfig(table="orders", where_clause="total > ?", args=(100,))
    q = QueryBuilder("ignored", config=cfg)
    assert q.table == "orders"
    assert q.to_sql() == ("SELECT * FROM orders WHERE total > ?", [100])


def test_execution_without_gateway_fails():
    with pytest.raises(DBError):
        QueryBuilder("users").count()


def test_to_sql_with_style_rebinds():
    q = QueryBuilder("users").where("status = $1", "active").limit(5)
    assert q.to_sql("qmark") == ("SELECT * FROM users WHERE status = ? LIMIT 5", ["active"])
