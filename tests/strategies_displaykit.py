# topmark:header:start
#
#   project      : DisplayKit
#   file         : strategies_displaykit.py
#   file_relpath : tests/strategies_displaykit.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hypothesis strategies for DisplayKit property tests."""

from __future__ import annotations

from typing import Any

from hypothesis import strategies as st

# Keys without the dotted-path separator so flatten/unflatten can round-trip.
s_keys: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(blacklist_characters=".", blacklist_categories=("Cs",)),
    min_size=1,
    max_size=8,
)

s_leaves: st.SearchStrategy[Any] = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.text(max_size=10),
    st.lists(st.integers(), max_size=3),
)

# Nested dicts whose nested mappings are never empty.
s_nested: st.SearchStrategy[dict[str, Any]] = st.recursive(
    st.dictionaries(s_keys, s_leaves, max_size=4),
    lambda children: st.dictionaries(
        s_keys, st.one_of(s_leaves, children.filter(bool)), max_size=4
    ),
    max_leaves=20,
)

_SGR_PARAMS: st.SearchStrategy[str] = st.lists(
    st.integers(min_value=0, max_value=255).map(str), max_size=3
).map(";".join)

s_ansi_sequences: st.SearchStrategy[str] = st.builds(
    lambda params, final: f"\x1b[{params}{final}",
    _SGR_PARAMS,
    st.sampled_from("JKmsu"),
)

# Text interleaving printable fragments, stray ESC / '[' characters and ANSI sequences.
s_ansi_text: st.SearchStrategy[str] = st.lists(
    st.one_of(
        st.text(max_size=6),
        st.sampled_from(["\x1b", "[", "\x1b[", "31", ";", "m"]),
        s_ansi_sequences,
    ),
    max_size=12,
).map("".join)
