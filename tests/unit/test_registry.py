import pytest

import dispatch_hooks
from dispatch_hooks import (
    HookId,
    HookPosition,
    HookRegistrationError,
    HookRegistry,
    default_registry,
)


def fn1(context, action):
    return None


def fn2(context, action):
    return None


def test_register_hook_returns_unique_ids(registry):
    other = HookRegistry()
    ids = [registry.register_hook("pre", "A", fn1) for _ in range(10)]
    ids += [registry.register_hook("post", "B", fn2) for _ in range(10)]
    ids += [other.register_hook("pre", "A", fn1) for _ in range(10)]

    assert all(isinstance(hook_id, HookId) for hook_id in ids)
    assert len(set(ids)) == len(ids)
    assert len(registry) == 20


def test_hook_id_is_truthy_and_names_its_type(registry):
    hook_id = registry.register_prehook("INCREMENT", fn1)

    assert hook_id
    assert hook_id.type == "INCREMENT"
    assert str(hook_id).startswith("INCREMENT#")


def test_ids_increase_monotonically(registry):
    first = registry.register_prehook("A", fn1)
    second = registry.register_prehook("A", fn1)

    assert second.seq > first.seq


@pytest.mark.parametrize(
    "position, type, callback",
    [
        (1, "A", fn1),
        (None, "A", fn1),
        ("middle", "A", fn1),
        ("pre", 5, fn1),
        ("pre", None, fn1),
        ("pre", "A", "not-a-function"),
        ("post", "A", None),
    ],
)
def test_register_hook_rejects_invalid_arguments(registry, position, type, callback):
    assert registry.register_hook(position, type, callback) is False
    assert len(registry) == 0
    assert "A" not in registry


def test_register_hook_accepts_enum_position(registry):
    registry.register_hook(HookPosition.POST, "A", fn1)

    assert registry.hooks_for("A", HookPosition.POST) == [fn1]
    assert registry.hooks_for("A", HookPosition.PRE) == []


def test_pre_and_post_wrappers_fix_position(registry):
    registry.register_prehook("A", fn1)
    registry.register_posthook("A", fn2)

    assert registry.hooks_for("A", HookPosition.PRE) == [fn1]
    assert registry.hooks_for("A", HookPosition.POST) == [fn2]


def test_hooks_keep_registration_order(registry):
    def h3(context, action):
        return None

    registry.register_prehook("A", fn2)
    registry.register_prehook("A", h3)
    registry.register_prehook("A", fn1)

    assert registry.hooks_for("A", HookPosition.PRE) == [fn2, h3, fn1]


def test_register_hooks_mixes_single_callables_and_lists(registry):
    result = registry.register_hooks("pre", {"A": fn1, "B": [fn2, "not-a-function"]})

    assert set(result) == {"A", "B"}
    assert len(result["A"]) == 1 and isinstance(result["A"][0], HookId)
    assert isinstance(result["B"][0], HookId)
    assert result["B"][1] is None

    assert registry.hooks_for("A", HookPosition.PRE) == [fn1]
    assert registry.hooks_for("B", HookPosition.PRE) == [fn2]
    assert len(registry) == 2


def test_register_hooks_reports_unusable_values(registry):
    result = registry.register_hooks("post", {"A": 42, "B": (fn1,), 7: fn2})

    assert result["A"] is None
    assert isinstance(result["B"][0], HookId)
    # a non-string type is rejected by the single registration
    assert result[7] == [False]
    assert registry.hooks_for("B", HookPosition.POST) == [fn1]
    assert len(registry) == 1


@pytest.mark.parametrize(
    "position, hooks",
    [(None, {"A": fn1}), ("sideways", {"A": fn1}), ("pre", ["A"]), ("pre", None)],
)
def test_register_hooks_rejects_invalid_arguments(registry, position, hooks):
    assert registry.register_hooks(position, hooks) is False
    assert len(registry) == 0


def test_bulk_pre_and_post_wrappers(registry):
    registry.register_prehooks({"A": [fn1]})
    registry.register_posthooks({"A": [fn2]})

    assert registry.hooks_for("A", HookPosition.PRE) == [fn1]
    assert registry.hooks_for("A", HookPosition.POST) == [fn2]


def test_unregister_hook_keeps_others_in_order(registry):
    def h3(context, action):
        return None

    registry.register_prehook("A", fn1)
    middle = registry.register_prehook("A", fn2)
    registry.register_prehook("A", h3)

    registry.unregister_hook(middle)

    assert registry.hooks_for("A", HookPosition.PRE) == [fn1, h3]


def test_unregister_hook_is_idempotent(registry):
    keep = registry.register_prehook("A", fn1)
    drop = registry.register_prehook("A", fn2)

    registry.unregister_hook(drop)
    once = list(registry)
    registry.unregister_hook(drop)

    assert list(registry) == once
    assert [record.id for record in registry] == [keep]


def test_unregister_unknown_ids_is_a_noop(registry):
    registry.register_prehook("A", fn1)

    registry.unregister_hook(HookId(type="A", seq=-1))
    registry.unregister_hook("not-an-id")
    registry.unregister_hook(None)

    assert len(registry) == 1


def test_clear_hooks_removes_every_type(registry):
    registry.register_prehook("A", fn1)
    registry.register_posthook("B", fn2)

    registry.clear_hooks()

    assert len(registry) == 0
    assert "A" not in registry
    assert "B" not in registry


def test_hooks_for_unknown_or_invalid_type(registry):
    assert registry.hooks_for("missing", HookPosition.PRE) == []
    assert registry.hooks_for(None, HookPosition.PRE) == []
    assert registry.hooks_for(["unhashable"], HookPosition.POST) == []


def test_decorator_registers_and_returns_function(registry):
    @registry.prehook("A")
    def audit(context, action):
        return None

    @registry.hook("post", "A")
    def notify(context, action):
        return None

    assert callable(audit)
    assert registry.hooks_for("A", HookPosition.PRE) == [audit]
    assert registry.hooks_for("A", HookPosition.POST) == [notify]


@pytest.mark.parametrize("position, type", [("middle", "A"), (None, "A"), ("pre", 3)])
def test_decorator_raises_on_invalid_arguments(registry, position, type):
    with pytest.raises(HookRegistrationError) as ei:
        registry.hook(position, type)

    assert ei.value.position == position
    assert ei.value.type == type
    assert len(registry) == 0


def test_decorator_raises_on_non_callable(registry):
    with pytest.raises(HookRegistrationError):
        registry.posthook("A")("not-a-function")


def test_module_functions_use_default_registry():
    hook_id = dispatch_hooks.register_prehook("A", fn1)
    dispatch_hooks.register_posthooks({"A": fn2})

    assert default_registry.hooks_for("A", HookPosition.PRE) == [fn1]
    assert default_registry.hooks_for("A", HookPosition.POST) == [fn2]

    dispatch_hooks.unregister_hook(hook_id)
    assert default_registry.hooks_for("A", HookPosition.PRE) == []

    dispatch_hooks.clear_hooks()
    assert "A" not in default_registry
