"""Tests for SettingsStore."""

import stackconf.config as config
import stackconf.config.arguments as arguments


class TestSettingsStoreBasic:
    """Reading and writing a single layer."""

    def test_empty_store(self) -> None:
        store = config.SettingsStore()
        assert store.all == {}
        assert store.empty is True
        assert store.read_only is False

    def test_initial_values_are_copied(self) -> None:
        """The store owns its data; the caller's dict is not aliased."""
        values = {"a": {"b": 1}}
        store = config.SettingsStore(values)
        store.set(["a", "b"], 2)
        assert values == {"a": {"b": 1}}

    def test_get_missing_path_is_none(self) -> None:
        store = config.SettingsStore({"a": {}})
        assert store.get(["a", "b", "c"]) is None

    def test_get_returns_copy(self) -> None:
        store = config.SettingsStore({"plugin": ["a"]})
        store.get("plugin").append("b")
        assert store.get("plugin") == ["a"]

    def test_get_empty_path_is_all(self) -> None:
        store = config.SettingsStore({"a": 1})
        assert store.get() == {"a": 1}
        assert store.get([]) == store.all

    def test_set_creates_levels(self) -> None:
        store = config.SettingsStore()
        assert store.set(["context", "env"], "prod") is True
        assert store.all == {"context": {"env": "prod"}}

    def test_set_none_removes(self) -> None:
        store = config.SettingsStore({"a": 1, "b": 2})
        assert store.set("a", None) is True
        assert store.all == {"b": 2}

    def test_set_empty_path_replaces_tree(self) -> None:
        store = config.SettingsStore({"a": 1})
        assert store.set([], {"b": 2}) is True
        assert store.all == {"b": 2}

    def test_set_empty_path_requires_mapping(self) -> None:
        store = config.SettingsStore({"a": 1})
        assert store.set([], "scalar") is False
        assert store.all == {"a": 1}

    def test_set_stores_a_copy(self) -> None:
        value = {"x": [1]}
        store = config.SettingsStore()
        store.set("a", value)
        value["x"].append(2)
        assert store.get("a") == {"x": [1]}

    def test_unset(self) -> None:
        store = config.SettingsStore({"a": 1, "b": 2})
        assert store.unset("a") is True
        assert store.unset("missing") is False
        assert store.all == {"b": 2}

    def test_clear(self) -> None:
        store = config.SettingsStore({"a": 1})
        assert store.clear() is True
        assert store.all == {}
        assert store.empty is True

    def test_failed_set_keeps_existing_value(self) -> None:
        store = config.SettingsStore({"a": "scalar"})
        assert store.set(["a", "b", 0], 1) is False
        assert store.all == {"a": "scalar"}
        assert store.get("a") == "scalar"

    def test_view_is_live_and_read_only(self) -> None:
        store = config.SettingsStore({"a": 1})
        view = store.view
        store.set("b", 2)
        assert view == {"a": 1, "b": 2}


class TestSettingsStoreReadOnly:
    """Read-only stores ignore every mutation."""

    def test_make_read_only_returns_same_instance(self) -> None:
        store = config.SettingsStore()
        assert store.make_read_only() is store
        assert store.read_only is True

    def test_all_holders_see_transition(self) -> None:
        store = config.SettingsStore()
        alias = store
        store.make_read_only()
        assert alias.set("a", 1) is False
        assert alias.all == {}

    def test_mutations_are_silent_noops(self) -> None:
        store = config.SettingsStore({"a": 1}).make_read_only()
        before = store.all

        assert store.set("b", 2) is False
        assert store.set("a", None) is False
        assert store.set([], {"x": 1}) is False
        assert store.unset("a") is False
        assert store.clear() is False

        assert store.all == before

    def test_created_read_only(self) -> None:
        store = config.SettingsStore({"a": 1}, read_only=True)
        assert store.set("a", 2) is False
        assert store.get("a") == 1


class TestSettingsStoreMerge:
    """Eager merging of two stores."""

    def test_merge_deep(self) -> None:
        first = config.SettingsStore({"a": {"x": 1, "y": 1}, "l": [1, 2], "s": "first"})
        second = config.SettingsStore({"a": {"y": 2}, "l": [3]})
        merged = first.merge(second)
        assert merged.all == {"a": {"x": 1, "y": 2}, "l": [3], "s": "first"}

    def test_merge_returns_new_mutable_store(self) -> None:
        first = config.SettingsStore({"a": 1}).make_read_only()
        second = config.SettingsStore({"b": 2}).make_read_only()
        merged = first.merge(second)
        assert merged is not first
        assert merged.read_only is False
        assert merged.set("c", 3) is True
        assert first.all == {"a": 1}
        assert second.all == {"b": 2}

    def test_merge_all_later_wins(self) -> None:
        merged = config.SettingsStore.merge_all(
            config.SettingsStore({"a": 1, "b": 1}),
            config.SettingsStore({"b": 2}),
            config.SettingsStore({"c": 3}),
        )
        assert merged.all == {"a": 1, "b": 2, "c": 3}

    def test_merge_all_of_nothing(self) -> None:
        assert config.SettingsStore.merge_all().all == {}

    def test_sub_settings(self) -> None:
        store = config.SettingsStore({"context": {"env": "prod"}, "app": "x"})
        sub = store.sub_settings(["context"])
        assert sub.all == {"env": "prod"}
        assert sub.read_only is False
        sub.set("env", "dev")
        assert store.get(["context", "env"]) == "prod"

    def test_sub_settings_missing_or_scalar_prefix(self) -> None:
        store = config.SettingsStore({"app": "x"})
        assert store.sub_settings("context").all == {}
        assert store.sub_settings("app").all == {}


class TestFromCommandLineArguments:
    """Building the command-line layer."""

    def test_context_string_values(self) -> None:
        first = config.SettingsStore.from_command_line_arguments(
            {"context": ["foo=bar"], "_": [arguments.Command.DEPLOY]}
        )
        second = config.SettingsStore.from_command_line_arguments(
            {"context": ["foo="], "_": [arguments.Command.DEPLOY]}
        )
        assert first.get(["context"])["foo"] == "bar"
        assert second.get(["context"])["foo"] == ""

    def test_context_equals_in_value(self) -> None:
        first = config.SettingsStore.from_command_line_arguments(
            {"context": ["foo==bar="], "_": [arguments.Command.DEPLOY]}
        )
        second = config.SettingsStore.from_command_line_arguments(
            {"context": ["foo=bar="], "_": [arguments.Command.DEPLOY]}
        )
        assert first.get(["context"])["foo"] == "=bar="
        assert second.get(["context"])["foo"] == "bar="

    def test_context_typed_values(self) -> None:
        store = config.SettingsStore.from_command_line_arguments(
            {
                "_": [arguments.Command.DEPLOY],
                "context": ["b=false", "n=0", 'o={"a": "b", "c": true, "d": ["a", "b"]}'],
            }
        )
        assert store.get(["context", "b"]) is False
        assert store.get(["context", "n"]) == 0
        assert store.get(["context", "o"]) == {"a": "b", "c": True, "d": ["a", "b"]}

    def test_bundling_stacks(self) -> None:
        listing = config.SettingsStore.from_command_line_arguments({"_": [arguments.Command.LIST]})
        deploy = config.SettingsStore.from_command_line_arguments(
            {"_": [arguments.Command.DEPLOY]}
        )
        exclusive = config.SettingsStore.from_command_line_arguments(
            {"_": [arguments.Command.WATCH], "exclusively": True, "STACKS": ["cool-stack"]}
        )
        assert listing.get(["bundlingStacks"]) == []
        assert deploy.get(["bundlingStacks"]) == ["*"]
        assert exclusive.get(["bundlingStacks"]) == ["cool-stack"]

    def test_pass_through(self, deploy_argv: dict) -> None:
        store = config.SettingsStore.from_command_line_arguments(deploy_argv)
        assert store.get(["outputsFile"]) == "outputs.json"
        assert store.get(["context"]) == {"env": "prod", "retries": 3}

    def test_accepts_validated_arguments(self) -> None:
        args = arguments.CommandLineArguments.from_mapping(
            {"_": ["synth"], "build": "mvn package"}
        )
        store = config.SettingsStore.from_command_line_arguments(args)
        assert store.get(["build"]) == "mvn package"

    def test_null_context_and_stacks(self) -> None:
        store = config.SettingsStore.from_command_line_arguments(
            {"_": ["deploy"], "context": None, "STACKS": None}
        )
        assert store.get(["context"]) == {}
        assert store.get(["bundlingStacks"]) == ["*"]
