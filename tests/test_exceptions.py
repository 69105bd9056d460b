import pytest

from cowdia.exceptions import EngineError, EngineRuntimeError, UnimplementedError


def test_what_without_location():
    error = EngineError("Foo", "bar")
    assert error.what() == "[Foo] bar"
    assert error.source == ""
    assert error.line == 0


def test_what_with_location():
    error = EngineError("Foo", "bar", "engine.cc", 12)
    assert error.what() == "[Foo] bar (engine.cc:12)"


def test_zero_line_hides_source():
    error = EngineError("Foo", "bar", "engine.cc", 0)
    assert error.what() == "[Foo] bar"


def test_str_matches_what():
    error = EngineError("Foo", "bar", "engine.cc", 7)
    assert str(error) == error.what()


def test_unimplemented_error():
    error = UnimplementedError()
    assert error.name == "UnImplementedException"
    assert error.message == "unimplemented"
    assert error.what() == "[UnImplementedException] unimplemented"


def test_unimplemented_error_with_location():
    error = UnimplementedError("scene.cc", 5)
    assert error.what() == "[UnImplementedException] unimplemented (scene.cc:5)"


def test_runtime_error():
    error = EngineRuntimeError("render system not found")
    assert error.name == "RuntimeException"
    assert error.what() == "[RuntimeException] render system not found"


def test_runtime_error_is_caught_as_engine_error():
    error = EngineRuntimeError("renderer is not initialized", "engine.cc", 3)
    with pytest.raises(EngineError) as info:
        raise error
    assert info.value is error
    assert error.what() == "[RuntimeException] renderer is not initialized (engine.cc:3)"
    assert error.line == 3