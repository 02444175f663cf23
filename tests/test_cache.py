"""Unit tests for the root listing disk cache."""

import hashlib

from jenkins_client.cache import RootListingCache, cache_key


def test_key_is_md5_of_url_and_username():
    expected = hashlib.md5(b"http://jenkins.local:8080bob").hexdigest()
    assert cache_key("http://jenkins.local:8080", "bob") == expected
    assert cache_key("http://a", None) == hashlib.md5(b"http://a").hexdigest()


def test_save_then_load(tmp_path):
    cache = RootListingCache(str(tmp_path / "nested"), "http://a", "bob")
    assert cache.load() is None

    cache.save({"jobs": [{"name": "demo"}]})
    assert cache.path.name == f"{cache_key('http://a', 'bob')}.json"
    assert cache.load() == {"jobs": [{"name": "demo"}]}
    assert cache.get_stats()["hits"] == 1
    assert cache.get_stats()["misses"] == 1


def test_unreadable_file_is_a_miss(tmp_path):
    cache = RootListingCache(str(tmp_path), "http://a")
    cache.path.write_text("{not json")
    assert cache.load() is None

    cache.path.write_text("[]")
    assert cache.load() is None
    assert cache.get_stats()["misses"] == 2


def test_clear(tmp_path):
    cache = RootListingCache(str(tmp_path), "http://a")
    assert cache.clear() is False
    cache.save({})
    assert cache.clear() is True
    assert not cache.path.exists()


def test_save_failure_is_logged_not_raised(tmp_path, caplog):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    cache = RootListingCache(str(blocker), "http://a")
    cache.save({"jobs": []})
    assert cache.load() is None
    assert "Could not write cache file" in caplog.text
