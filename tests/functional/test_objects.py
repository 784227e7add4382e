from underbar.functional.objects import defaults, extend


class TestExtend:
    def test_later_sources_win(self):
        assert extend({"a": 1}, {"b": 2}, {"a": 3}) == {"a": 3, "b": 2}

    def test_mutates_and_returns_target(self):
        target = {"a": 1}
        result = extend(target, {"b": 2})
        assert result is target
        assert target == {"a": 1, "b": 2}

    def test_overwrites_existing_keys(self):
        assert extend({"a": 1}, {"a": None}) == {"a": None}

    def test_no_sources(self):
        assert extend({"a": 1}) == {"a": 1}

    def test_none_sources_are_skipped(self):
        assert extend({"a": 1}, None, {"b": 2}) == {"a": 1, "b": 2}

    def test_copies_every_key(self):
        target = {}
        extend(target, {"key1": "something"}, {"key2": "new", "key3": "else"}, {"bla": 1})
        assert set(target) == {"key1", "key2", "key3", "bla"}


class TestDefaults:
    def test_existing_keys_are_kept(self):
        assert defaults({"a": 1}, {"a": 2, "b": 2}) == {"a": 1, "b": 2}

    def test_first_source_wins(self):
        assert defaults({}, {"a": 1}, {"a": 2}) == {"a": 1}

    def test_falsy_existing_values_are_kept(self):
        assert defaults({"a": None, "b": 0}, {"a": 1, "b": 1}) == {"a": None, "b": 0}

    def test_mutates_and_returns_target(self):
        target = {}
        assert defaults(target, {"x": 1}) is target
        assert target == {"x": 1}
