import pytest

from templatepolicy import NO_VALUE, InvalidOption, MissingKeyPolicy, OnFaultPolicy, PolicyStore, Template
from templatepolicy.core.options import NO_VALUE_TEXT
from templatepolicy.core.resolver import apply_options


def test_new_template_has_defaults():
    tmpl = Template("t")
    assert tmpl.current_missing_key_policy() is MissingKeyPolicy.INVALID
    assert tmpl.current_fault_policy() is OnFaultPolicy.RECOVER


def test_option_chains():
    tmpl = Template("t")
    assert tmpl.option("missingkey=zero") is tmpl
    tmpl.option("onpanic=nop").option("missingkey=error")
    assert tmpl.current_missing_key_policy() is MissingKeyPolicy.ERROR
    assert tmpl.current_fault_policy() is OnFaultPolicy.NO_RECOVER


def test_option_with_no_arguments():
    tmpl = Template("t").option()
    assert tmpl.policy == PolicyStore()


def test_option_failure_propagates():
    tmpl = Template("t")
    with pytest.raises(InvalidOption):
        tmpl.option("onpanic=nop", "missingkey")
    assert tmpl.current_fault_policy() is OnFaultPolicy.NO_RECOVER


def test_templates_do_not_share_policy():
    a = Template("a").option("missingkey=error")
    b = Template("b")
    assert a.policy is not b.policy
    assert b.current_missing_key_policy() is MissingKeyPolicy.INVALID


def test_store_serialisation():
    store = PolicyStore(missing_key=MissingKeyPolicy.ZERO_VALUE)
    assert store.to_dict() == {"missingkey": "zero", "onpanic": "recover"}
    assert store.to_options() == ["missingkey=zero", "onpanic=recover"]
    assert PolicyStore().to_options() == ["missingkey=invalid", "onpanic=recover"]


def test_to_options_reproduces_store():
    store = PolicyStore(missing_key=MissingKeyPolicy.ERROR, on_fault=OnFaultPolicy.NO_RECOVER)
    assert apply_options(PolicyStore(), store.to_options()) == store


def test_store_validate():
    store = PolicyStore()
    store.validate()
    store.on_fault = "nop"
    with pytest.raises(ValueError):
        store.validate()


@pytest.mark.parametrize("kwargs", [
    {"missing_key": "bogus"},
    {"missing_key": "zero"},
    {"on_fault": None},
])
def test_invalid_store_construction_rejected(kwargs):
    with pytest.raises(ValueError):
        PolicyStore(**kwargs)


def test_policy_write_does_not_reach_template():
    tmpl = Template("t").option("missingkey=zero")
    tmpl.policy.missing_key = "bogus"
    assert tmpl.current_missing_key_policy() is MissingKeyPolicy.ZERO_VALUE
    assert tmpl.policy == PolicyStore(missing_key=MissingKeyPolicy.ZERO_VALUE)


def test_no_value_sentinel():
    assert str(NO_VALUE) == NO_VALUE_TEXT == "<no value>"
    assert not NO_VALUE
    assert type(NO_VALUE)() is NO_VALUE
