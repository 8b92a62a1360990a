"""
Default computation for the command-line settings layer.

The command-line layer is derived from the argument bag by an ordered set
of rules. Each rule is a pure function

    rule(command, arguments, resolved) -> value | None

where `resolved` is a read-only view of the keys produced by earlier rules.
A None result leaves the key absent from the layer.
"""

import collections.abc as _abc
import typing as _typing

import stackconf.config.arguments as arguments
import stackconf.config.coercion as coercion
import stackconf.layers as layers

Rule: _typing.TypeAlias = _abc.Callable[
    [str | None, arguments.CommandLineArguments, _abc.Mapping[str, _typing.Any]],
    _typing.Any,
]

# Commands that build assets; every other command skips bundling entirely
BUNDLING_COMMANDS = frozenset(
    {
        arguments.Command.DEPLOY.value,
        arguments.Command.DIFF.value,
        arguments.Command.SYNTH.value,
        arguments.Command.SYNTHESIZE.value,
        arguments.Command.WATCH.value,
    }
)

# Arguments copied into the layer unchanged, under the same key
PASS_THROUGH_KEYS = (
    "app",
    "browser",
    "build",
    "debug",
    "language",
    "pathMetadata",
    "assetMetadata",
    "profile",
    "plugin",
    "requireApproval",
    "toolkitStackName",
    "versionReporting",
    "staging",
    "output",
    "outputsFile",
    "progress",
    "lookups",
    "rollback",
    "notices",
)


def context(
    command: str | None,
    args: arguments.CommandLineArguments,
    resolved: _abc.Mapping[str, _typing.Any],
) -> dict[str, _typing.Any]:
    """Coerced `--context` assignments. Always present, possibly empty."""
    return coercion.parse_context_assignments(args.context)


def tags(
    command: str | None,
    args: arguments.CommandLineArguments,
    resolved: _abc.Mapping[str, _typing.Any],
) -> list[dict[str, str]] | None:
    return coercion.parse_tags(args.tags)


def toolkit_bucket(
    command: str | None,
    args: arguments.CommandLineArguments,
    resolved: _abc.Mapping[str, _typing.Any],
) -> dict[str, str] | None:
    """Bootstrap bucket overrides, omitted entirely when neither is given."""
    bucket = {
        "bucketName": args.get("bootstrapBucketName"),
        "kmsKeyId": args.get("bootstrapKmsKeyId"),
    }
    bucket = {key: value for key, value in bucket.items() if value is not None}
    return bucket or None


def bundling_stacks(
    command: str | None,
    args: arguments.CommandLineArguments,
    resolved: _abc.Mapping[str, _typing.Any],
) -> list[str]:
    """
    Stacks whose assets should be bundled.

    Bundling commands bundle everything (["*"]) unless they run
    `exclusively` on an explicit stack list, in which case only those
    stacks are bundled. Other commands bundle nothing.
    """
    if command not in BUNDLING_COMMANDS:
        return []
    if args.exclusively and args.stacks:
        return list(args.stacks)
    return ["*"]


def pass_through(key: str) -> Rule:
    """Make a rule that copies argument `key` verbatim."""

    def rule(
        command: str | None,
        args: arguments.CommandLineArguments,
        resolved: _abc.Mapping[str, _typing.Any],
    ) -> _typing.Any:
        return args.get(key)

    rule.__name__ = f"pass_through_{key}"
    return rule


DEFAULT_RULES: tuple[tuple[str, Rule], ...] = (
    ("context", context),
    ("tags", tags),
    *((key, pass_through(key)) for key in PASS_THROUGH_KEYS),
    ("toolkitBucket", toolkit_bucket),
    ("bundlingStacks", bundling_stacks),
)


def compute_settings(
    args: arguments.CommandLineArguments,
    rules: _abc.Iterable[tuple[str, Rule]] = DEFAULT_RULES,
) -> dict[str, _typing.Any]:
    """
    Evaluate rules in order and collect their non-None results.

    Args:
        args: Validated argument bag.
        rules: (key, rule) pairs; defaults to DEFAULT_RULES.

    Returns:
        The command-line settings layer as a plain dict.
    """
    resolved: dict[str, _typing.Any] = {}
    command = args.command
    for key, rule in rules:
        value = rule(command, args, layers.TreeView(resolved))
        if value is not None:
            resolved[key] = value
    return resolved
