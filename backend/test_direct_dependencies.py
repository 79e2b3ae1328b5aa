import logging

import pytest

from archview import Model, ViewSet


def names(view):
    return {ev.element.name for ev in view.elements}


def relationship_pairs(view):
    model = view.model
    return {
        (model.source_of(rv.relationship).name, model.destination_of(rv.relationship).name)
        for rv in view.relationships
    }


@pytest.fixture
def api_scenario():
    model = Model()
    system = model.add_software_system("Platform")
    external = model.add_software_system("ExternalService")
    logging_system = model.add_software_system("LoggingSystem")
    api = model.add_container(system, "API")
    a = model.add_component(api, "A")
    model.add_component(api, "B")
    model.uses(a, external, "calls")
    model.uses(external, logging_system, "logs to")
    return model, api


def test_scenario_one_hop_and_pruned(api_scenario):
    model, api = api_scenario
    view = ViewSet(model).create_component_view(api, "api")
    view.add_all_components()

    view.add_direct_dependencies()

    assert [ev.element.name for ev in view.elements] == ["A", "B", "ExternalService"]
    assert relationship_pairs(view) == {("A", "ExternalService")}


def test_neighbours_of_neighbours_are_not_added(shop):
    model = shop["model"]
    model.uses(shop["customer"], shop["orders"])
    model.uses(shop["orders"], shop["billing"])
    helpdesk = model.add_software_system("Helpdesk")
    model.uses(shop["customer"], helpdesk)
    view = ViewSet(model).create_component_view(shop["api"], "api")
    view.add(shop["orders"])

    view.add_direct_dependencies()

    assert names(view) == {"Orders", "Customer", "Billing"}
    assert "Helpdesk" not in names(view)


def test_relationship_between_new_neighbours_is_pruned(shop):
    model = shop["model"]
    x = model.add_software_system("X")
    y = model.add_software_system("Y")
    model.uses(shop["orders"], x)
    model.uses(shop["orders"], y)
    x_to_y = model.uses(x, y)
    view = ViewSet(model).create_component_view(shop["api"], "api")
    view.add(shop["orders"])

    view.add_direct_dependencies()

    assert names(view) == {"Orders", "X", "Y"}
    assert not view.is_relationship_in_view(x_to_y)
    assert relationship_pairs(view) == {("Orders", "X"), ("Orders", "Y")}


def test_empty_view_takes_neighbours_of_focus_container(shop):
    model = shop["model"]
    model.uses(shop["customer"], shop["api"])
    model.uses(shop["api"], shop["payments"])
    model.uses(shop["web"], shop["api"])
    view = ViewSet(model).create_component_view(shop["api"], "api")

    view.add_direct_dependencies()

    assert names(view) == {"Customer", "Payment Provider", "Web"}
    # The focus container is never a member, so its own relationships stay out
    assert view.relationships == []


def test_expansion_goes_through_containment_filter(shop):
    model = shop["model"]
    model.uses(shop["orders"], shop["checkout"])
    model.uses(shop["orders"], shop["shop"])
    model.uses(shop["web"], shop["orders"])
    view = ViewSet(model).create_component_view(shop["api"], "api")
    view.add(shop["orders"])

    view.add_direct_dependencies()

    assert names(view) == {"Orders", "Web"}
    assert view.validate().is_valid


def test_expansion_is_idempotent(shop):
    model = shop["model"]
    model.uses(shop["customer"], shop["orders"])
    model.uses(shop["orders"], shop["payments"])
    view = ViewSet(model).create_component_view(shop["api"], "api")
    view.add_all_components()

    view.add_direct_dependencies()
    first = ([ev.id for ev in view.elements], [rv.id for rv in view.relationships])
    view.add_direct_dependencies()
    second = ([ev.id for ev in view.elements], [rv.id for rv in view.relationships])

    assert names(view) == {"Orders", "Billing", "Customer", "Payment Provider"}
    assert second == first


def test_expansion_order_independent(shop):
    model = shop["model"]
    model.uses(shop["customer"], shop["orders"])
    model.uses(shop["billing"], shop["payments"])

    forward = ViewSet(model).create_component_view(shop["api"], "forward")
    forward.add(shop["orders"])
    forward.add(shop["billing"])
    forward.add_direct_dependencies()

    backward = ViewSet(model).create_component_view(shop["api"], "backward")
    backward.add(shop["billing"])
    backward.add(shop["orders"])
    backward.add_direct_dependencies()

    assert names(forward) == names(backward)
    assert relationship_pairs(forward) == relationship_pairs(backward)


def test_expansion_logs_summary(shop, caplog):
    model = shop["model"]
    model.uses(shop["customer"], shop["orders"])
    view = ViewSet(model).create_component_view(shop["api"], "api")
    view.add(shop["orders"])

    with caplog.at_level(logging.INFO, logger="archview"):
        view.add_direct_dependencies()

    record = next(r for r in caplog.records if r.name == "archview.view.component_view")
    assert record.view_key == "api"
    assert record.added == 1
    assert record.pruned == 0


def test_expansion_ignores_unknown_variants(shop):
    from archview import Element

    model = shop["model"]
    odd = Element(name="Odd")
    model._elements[odd.id] = odd
    model.uses(shop["orders"], odd)
    view = ViewSet(model).create_component_view(shop["api"], "api")
    view.add(shop["orders"])

    view.add_direct_dependencies()

    assert names(view) == {"Orders"}
