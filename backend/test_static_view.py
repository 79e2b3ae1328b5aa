def test_add_element_without_relationships_hides_them(shop, views):
    model = shop["model"]
    rel = model.uses(shop["orders"], shop["billing"])
    view = views.create_component_view(shop["api"], "api")
    view.add(shop["orders"])

    view.add_element(shop["billing"], False)

    assert view.is_element_in_view(shop["billing"])
    assert not view.is_relationship_in_view(rel)


def test_removed_relationship_returns_when_endpoint_is_re_added(shop, views):
    model = shop["model"]
    rel = model.uses(shop["orders"], shop["billing"])
    view = views.create_component_view(shop["api"], "api")
    view.add_all_components()

    view.remove_relationship(rel)
    assert view.relationships == []

    # Re-adding a present element does not restore it
    view.add(shop["billing"])
    assert view.relationships == []

    view.remove(shop["billing"])
    view.add(shop["billing"])
    assert view.is_relationship_in_view(rel)


def test_relationship_from_other_model_is_ignored(shop, views):
    from archview import Model

    other = Model()
    a = other.add_person("A")
    b = other.add_person("B")
    foreign = other.uses(a, b)
    view = views.create_component_view(shop["api"], "api")

    view.remove_relationship(foreign)
    view.add_element(a)

    assert view.elements == []


def test_elements_are_snapshots(shop, views):
    view = views.create_component_view(shop["api"], "api")
    view.add_all_components()

    for ev in view.elements:
        view.remove(ev.element)

    assert view.elements == []


def test_people_and_systems_bulk_add(shop, views):
    view = views.create_component_view(shop["api"], "api")

    view.add_all_people()
    view.add_all_software_systems()

    assert [ev.element.name for ev in view.elements] == ["Customer", "Payment Provider"]
