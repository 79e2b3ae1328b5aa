import pytest

from archview import Model, ViewSet


@pytest.fixture
def model():
    return Model()


@pytest.fixture
def shop(model):
    """Shop system with an API and a Web container, a customer and a payment provider."""
    customer = model.add_person("Customer")
    shop = model.add_software_system("Shop")
    payments = model.add_software_system("Payment Provider")
    api = model.add_container(shop, "API", technology="FastAPI")
    web = model.add_container(shop, "Web", technology="React")
    orders = model.add_component(api, "Orders")
    billing = model.add_component(api, "Billing")
    checkout = model.add_component(web, "Checkout")
    return {
        "model": model,
        "customer": customer,
        "shop": shop,
        "payments": payments,
        "api": api,
        "web": web,
        "orders": orders,
        "billing": billing,
        "checkout": checkout,
    }


@pytest.fixture
def views(model):
    return ViewSet(model)
