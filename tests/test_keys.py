import pytest

from skpcache.keys import CacheKey, CompositeKey, full_key_string, key_string


def test_string_key():
    assert key_string("my_key") == "my_key"
    assert full_key_string("my_key") == "my_key"


def test_str_key():
    assert key_string("my_key") == "my_key"


def test_tuple_key_1():
    assert key_string((5,)) == "5"


def test_tuple_key_2():
    assert key_string(("user", 123)) == "user:123"


def test_tuple_key_3():
    assert key_string(("org", 1, "user")) == "org:1:user"


def test_tuple_key_4():
    assert key_string(("a", 1, "b", 2)) == "a:1:b:2"


@pytest.mark.parametrize("key", [(), (1, 2, 3, 4, 5)])
def test_tuple_key_bad_length(key):
    with pytest.raises(TypeError):
        key_string(key)


def test_unsupported_key_type():
    with pytest.raises(TypeError):
        key_string(3.5)


def test_composite_key():
    key = CompositeKey().with_namespace("myapp").part("user").part(123)
    assert key.cache_key() == "user:123"
    assert key.namespace() == "myapp"
    assert key.full_key() == "myapp:user:123"
    assert full_key_string(key) == "myapp:user:123"
    assert key_string(key) == "user:123"


def test_composite_key_no_namespace():
    key = CompositeKey().part("session").part("abc123")
    assert key.cache_key() == "session:abc123"
    assert key.full_key() == "session:abc123"
    assert key.namespace() is None


def test_composite_parts():
    key = CompositeKey().parts(["a", 1]).part("b")
    assert key.cache_key() == "a:1:b"


def test_composite_builder_does_not_mutate():
    base = CompositeKey().part("x")
    extended = base.part("y")
    assert base.cache_key() == "x"
    assert extended.cache_key() == "x:y"


def test_composite_equality():
    assert CompositeKey().part(1) == CompositeKey().part("1")
    assert CompositeKey().part(1) != CompositeKey().with_namespace("n").part(1)


def test_custom_cache_key_subclass():
    class Session(CacheKey):
        def cache_key(self):
            return "abc"

        def namespace(self):
            return "sess"

    assert Session().full_key() == "sess:abc"
    assert key_string(Session()) == "abc"


def test_cache_key_is_abstract():
    with pytest.raises(TypeError):
        CacheKey()