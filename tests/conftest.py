from __future__ import annotations

import pytest

from namespaces.models import NamespaceRecord, PublicVarRecord


def _var(name: str, **kwargs: object) -> PublicVarRecord:
    return PublicVarRecord(name=name, **kwargs)


@pytest.fixture
def sample_namespaces() -> list[NamespaceRecord]:
    return [
        NamespaceRecord(
            name="foo",
            publics=(
                _var("bar", file="foo.py", doc="Foo's bar."),
                _var(
                    "Proto",
                    file="foo.py",
                    kind="class",
                    members=(_var("handle", file="foo.py", kind="method"),),
                ),
            ),
        ),
        NamespaceRecord(
            name="foo.bar",
            publics=(_var("quux", file="foo/bar.py"),),
        ),
        NamespaceRecord(
            name="baz",
            publics=(
                _var("bar", file="baz.py"),
                _var("a.b*c", file="baz.py"),
            ),
        ),
    ]
