"""Shared test fixtures for molpov."""

import re

import pytest

from molpov import Molecule

_IF = re.compile(r"#if\s*\(([^)]*)\)")
_IFDEF = re.compile(r"#ifdef\s*\(\s*(\w+)\s*\)")

TIMESTAMP = "Sat Oct 17 12:00:00 UTC 2026"


def _resolve(text, true_names, declared=None):
    """Keep only the lines the renderer would see for the given flags.

    Evaluates ``#if (A | B)``, ``#ifdef (A)``, ``#else`` and ``#end``.
    Names in *true_names* are true, everything else is false.
    *declared* (defaults to *true_names*) is used for ``#ifdef``.
    """
    declared = set(true_names) if declared is None else set(declared)
    kept = []
    stack = []  # (parent_active, branch_active)
    active = True
    for line in text.splitlines():
        stripped = line.strip()
        m_if = _IF.match(stripped)
        m_ifdef = _IFDEF.match(stripped)
        if m_ifdef:
            cond = m_ifdef.group(1) in declared
            stack.append((active, cond))
            active = active and cond
        elif m_if:
            names = [n.strip() for n in m_if.group(1).split("|")]
            cond = any(n in true_names for n in names)
            stack.append((active, cond))
            active = active and cond
        elif stripped.startswith("#else"):
            parent, cond = stack[-1]
            stack[-1] = (parent, not cond)
            active = parent and not cond
        elif stripped.startswith("#end"):
            parent, _ = stack.pop()
            active = parent
        elif active:
            kept.append(line)
    assert not stack, "unclosed conditional block"
    return kept


def _brace_depths(lines):
    """Return the running brace depth after each line, ignoring comments."""
    depth = 0
    depths = []
    for line in lines:
        code = line.split("//", 1)[0]
        # Quoted strings (#render, #include) hold no braces we care about.
        code = re.sub(r'"[^"]*"', "", code)
        depth += code.count("{") - code.count("}")
        depths.append(depth)
    return depths


@pytest.fixture
def resolve():
    """Return the conditional-directive resolver."""
    return _resolve


@pytest.fixture
def brace_depths():
    """Return the brace-depth counter."""
    return _brace_depths


@pytest.fixture
def timestamp():
    """Return a fixed header timestamp."""
    return TIMESTAMP


@pytest.fixture
def water():
    """Water: O bonded to two H atoms, roughly in the x-y plane."""
    return Molecule.from_arrays(
        ["O", "H", "H"],
        [[0.0, 0.0, 0.0], [0.96, 0.0, 0.0], [-0.24, 0.93, 0.0]],
        bonds=[(1, 2), (1, 3)],
        title="water",
    )


@pytest.fixture
def ethene():
    """Ethene with a C=C double bond along x and four C-H bonds."""
    return Molecule.from_arrays(
        ["C", "C", "H", "H", "H", "H"],
        [
            [0.0, 0.0, 0.0],
            [1.33, 0.0, 0.0],
            [-0.57, 0.92, 0.0],
            [-0.57, -0.92, 0.0],
            [1.90, 0.92, 0.0],
            [1.90, -0.92, 0.0],
        ],
        bonds=[(1, 2, 2), (1, 3), (1, 4), (2, 5), (2, 6)],
        title="ethene",
        atom_types=["C2", "C2", "H", "H", "H", "H"],
    )


@pytest.fixture
def argon_pair():
    """Two unbonded argon atoms."""
    return Molecule.from_arrays(
        ["Ar", "Ar"],
        [[0.0, 0.0, 0.0], [3.8, 0.0, 0.0]],
        title="argon dimer",
    )
