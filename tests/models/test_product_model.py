from app.models.product import Product, empty_draft


def test_product_from_api_payload():
    """Тест: товар создаётся из JSON сервера, лишние поля игнорируются."""
    product = Product.model_validate({'id': 42, 'name': 'Widget', 'price': 9.99, 'quantity': 3, 'createdAt': 'x'})
    assert product.id == 42
    assert product.name == 'Widget'
    assert product.price == 9.99
    assert product.quantity == 3

def test_from_api_list_keeps_order():
    rows = [{'id': 3, 'name': 'C'}, {'id': 1, 'name': 'A'}, {'id': 2, 'name': 'B'}]
    products = Product.from_api_list(rows)
    assert [p.id for p in products] == [3, 1, 2]

def test_display_price_two_decimals():
    assert Product(id=1, name='Gadget', price=5, quantity=1).get_display_price() == "5.00"

def test_to_draft_is_independent_copy():
    """Тест: черновик является отдельной копией, изменения не затрагивают товар."""
    product = Product(id=7, name='Bolt', price=0.5, quantity=100)
    draft = product.to_draft()
    draft['name'] = 'Nut'
    assert product.name == 'Bolt'
    assert draft == {'id': 7, 'name': 'Nut', 'price': 0.5, 'quantity': 100}

def test_empty_draft_template():
    assert empty_draft() == {'id': '', 'name': '', 'price': '', 'quantity': ''}
    # Каждый вызов возвращает новый словарь
    assert empty_draft() is not empty_draft()
