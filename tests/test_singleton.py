import pytest

from cowdia.singleton import Singleton


class Alpha(Singleton):
    pass


class Beta(Singleton):
    pass


def test_get_returns_live_instance():
    alpha = Alpha()
    try:
        assert Alpha.get() is alpha
    finally:
        Singleton.release(alpha)


def test_second_instance_is_rejected():
    alpha = Alpha()
    try:
        with pytest.raises(RuntimeError):
            Alpha()
        assert Alpha.get() is alpha
    finally:
        Singleton.release(alpha)


def test_get_without_instance_raises():
    alpha = Alpha()
    assert Alpha.get() is alpha
    Singleton.release(alpha)
    with pytest.raises(LookupError) as excinfo:
        Alpha.get()
    assert excinfo.type is LookupError or issubclass(excinfo.type, LookupError)
    replacement = Alpha()
    try:
        assert Alpha.get() is replacement
        assert replacement is not alpha
    finally:
        Singleton.release(replacement)


def test_release_allows_new_instance():
    first = Alpha()
    Singleton.release(first)
    second = Alpha()
    try:
        assert Alpha.get() is second
        assert second is not first
    finally:
        Singleton.release(second)


def test_classes_are_independent():
    alpha = Alpha()
    beta = Beta()
    try:
        assert Alpha.get() is alpha
        assert Beta.get() is beta
    finally:
        Singleton.release(alpha)
        Singleton.release(beta)


def test_release_of_stale_instance_keeps_current():
    first = Alpha()
    Singleton.release(first)
    second = Alpha()
    try:
        Singleton.release(first)
        assert Alpha.get() is second
    finally:
        Singleton.release(second)


def test_context_manager_releases():
    with Alpha() as alpha:
        assert Alpha.get() is alpha
    with pytest.raises(LookupError):
        Alpha.get()
    fresh = Alpha()
    try:
        assert Alpha.get() is fresh
    finally:
        Singleton.release(fresh)