"""
Every CPU backend satisfies the Backend protocol.
"""

import pytest

from pydecomp.core import Backend
from pydecomp.qr.backends import CPUGramSchmidtBackend, CPUHouseholderBackend
from pydecomp.lup.backends import CPUCroutBackend


@pytest.mark.parametrize("backend, name", [
    (CPUHouseholderBackend(), 'cpu_householder'),
    (CPUGramSchmidtBackend(), 'cpu_gram_schmidt'),
    (CPUCroutBackend(), 'cpu_crout'),
])
def test_backend_protocol(backend, name):
    assert isinstance(backend, Backend)
    assert backend.name == name


def test_plain_object_is_not_a_backend():
    assert not isinstance(object(), Backend)
