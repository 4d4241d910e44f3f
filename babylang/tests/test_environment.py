"""
Tests for scopes and assignment disciplines.
"""
from babylang.environment import Environment
from babylang.objects import FALSE, NULL, TRUE, Array, Error, Integer, String


def test_assign_new_name_stores_a_copy():
    """
    Test that a first write stores a copy in the current scope.
    """
    env = Environment()
    value = Integer(1)
    assert env.assign('x', value) is None
    stored = env.get('x')
    assert stored is not value
    assert stored.value == 1


def test_bind_stores_the_object_itself():
    """
    Test identity binding.
    """
    env = Environment()
    value = Array([Integer(1)])
    env.bind('a', value)
    assert env.get('a') is value


def test_lookup_walks_outward():
    """
    Test that inner scopes see outer bindings and not the reverse.
    """
    outer = Environment()
    outer.assign('x', Integer(1))
    inner = outer.enclose()
    inner.assign('y', Integer(2))
    assert inner.get('x').value == 1
    assert outer.get('y') is None
    assert inner.resolve('x') is outer
    assert inner.resolve('missing') is None


def test_assign_overwrites_in_the_owning_scope():
    """
    Test that writing an existing outer name mutates that object.
    """
    outer = Environment()
    outer.assign('s', String("old"))
    alias = outer.get('s')
    inner = outer.enclose()
    inner.assign('s', String("new"))
    assert 's' not in inner.store
    assert alias.value == "new"


def test_assign_type_mismatch():
    """
    Test that changing a binding's type is refused.
    """
    env = Environment()
    env.assign('x', Integer(1))
    result = env.assign('x', String("s"))
    assert isinstance(result, Error)
    assert result.message == "type mismatch: cannot assign STRING to 'x' (INTEGER)"
    assert env.get('x').value == 1


def test_singletons_are_rebound():
    """
    Test that booleans and null are replaced rather than modified.
    """
    env = Environment()
    env.assign('flag', TRUE)
    env.assign('flag', FALSE)
    assert env.get('flag') is FALSE
    assert TRUE.value is True
    env.assign('nothing', NULL)
    env.assign('nothing', NULL)
    assert env.get('nothing') is NULL


def test_bind_shadows_in_current_scope():
    """
    Test that identity binding never touches outer scopes.
    """
    outer = Environment()
    outer.assign('x', Integer(1))
    inner = outer.enclose()
    inner.bind('x', Integer(2))
    assert inner.get('x').value == 2
    assert outer.get('x').value == 1
