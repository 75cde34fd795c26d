from cpufacts.core.keyvalue import lookup, nest_entry, parse_hierarchical


def test_dotted_keys_become_nested_records():
    record = parse_hierarchical(["ns.a.b: v1", "ns.c: v2"], "ns.")
    assert record == {"a": {"b": "v1"}, "c": "v2"}


def test_namespace_without_trailing_dot():
    record = parse_hierarchical(["machdep.cpu.core_count: 6"], "machdep.cpu")
    assert record == {"core_count": "6"}


def test_siblings_sharing_a_prefix_are_merged():
    lines = [
        "machdep.cpu.cache.linesize: 64",
        "machdep.cpu.cache.size: 256",
        "machdep.cpu.tlb.inst.large: 8",
        "machdep.cpu.tlb.data.small: 64",
    ]
    record = parse_hierarchical(lines, "machdep.cpu")
    assert record == {
        "cache": {"linesize": "64", "size": "256"},
        "tlb": {"inst": {"large": "8"}, "data": {"small": "64"}},
    }


def test_prefix_is_stripped_once():
    record = parse_hierarchical(["hw.hw.x: 1"], "hw")
    assert record == {"hw": {"x": "1"}}


def test_colon_in_first_or_last_position_is_skipped():
    record = parse_hierarchical([": v", "ns.key:", "ns.ok: yes"], "ns")
    assert record == {"ok": "yes"}


def test_value_may_contain_colons():
    record = parse_hierarchical(["ns.time: 12:30:00"], "ns")
    assert record == {"time": "12:30:00"}


def test_later_value_replaces_leaf_with_subtree():
    record = parse_hierarchical(["ns.a: leaf", "ns.a.b: deep"], "ns")
    assert record == {"a": {"b": "deep"}}


def test_nest_entry_peels_right_to_left():
    assert nest_entry("a.b.c", "v") == ("a", {"b": {"c": "v"}})
    assert nest_entry("plain", "v") == ("plain", "v")


def test_lookup_walks_dotted_paths():
    record = {"cache": {"size": "256"}, "brand_string": "CPU"}
    assert lookup(record, "cache.size") == "256"
    assert lookup(record, "brand_string") == "CPU"
    assert lookup(record, "cache.missing") == ""
    assert lookup(record, "cache") == ""
    assert lookup(record, "brand_string.deeper", default="n/a") == "n/a"
