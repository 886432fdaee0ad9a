"""
Tests for the HTTP API: JSON contract, status codes and published events.
"""
from datetime import datetime, timezone

API = "/api/v1"


def criar_cardapio(client):
    categoria = client.post(f"{API}/categorias/", json={"name": "Doces"}).json()
    brigadeiro = client.post(f"{API}/produtos/", json={
        "name": "Brigadeiro Gourmet",
        "unitPrice": "6.00",
        "unitOfMeasure": "unit",
        "categoryId": categoria["id"],
        "tracksStock": True,
        "currentStock": "120",
    }).json()
    torta = client.post(f"{API}/produtos/", json={
        "name": "Torta de Morango",
        "unitPrice": 130,
        "unitOfMeasure": "weight",
        "categoryId": categoria["id"],
    }).json()
    return categoria, brigadeiro, torta


def test_root_and_health(client):
    assert client.get("/health").json()["status"] == "healthy"
    assert client.get(f"{API}/").status_code == 200


def test_product_contract(client):
    categoria, brigadeiro, torta = criar_cardapio(client)

    assert brigadeiro == {
        "id": brigadeiro["id"],
        "name": "Brigadeiro Gourmet",
        "unitPrice": "6.00",
        "unitOfMeasure": "unit",
        "categoryId": categoria["id"],
        "tracksStock": True,
        "currentStock": "120.000",
    }
    assert torta["unitPrice"] == "130.00"
    assert torta["tracksStock"] is False
    assert torta["currentStock"] is None

    listagem = client.get(f"{API}/produtos/").json()
    assert [p["id"] for p in listagem] == [brigadeiro["id"], torta["id"]]
    assert listagem[0]["category"] == {"id": categoria["id"], "name": "Doces"}


def test_product_validation(client):
    categoria, _, _ = criar_cardapio(client)
    base = {"name": "X", "unitPrice": "1.00", "unitOfMeasure": "unit", "categoryId": categoria["id"]}

    assert client.post(f"{API}/produtos/", json={**base, "categoryId": 999}).status_code == 404
    assert client.post(f"{API}/produtos/", json={**base, "unitOfMeasure": "litre"}).status_code == 422
    assert client.post(f"{API}/produtos/", json={**base, "unitPrice": "-1"}).status_code == 422
    assert client.post(f"{API}/produtos/", json={**base, "color": "red"}).status_code == 422


def test_product_update_and_idempotent_delete(client):
    _, brigadeiro, _ = criar_cardapio(client)
    url = f"{API}/produtos/{brigadeiro['id']}"

    atualizado = client.put(url, json={"unitPrice": "7.5"})
    assert atualizado.status_code == 200
    assert atualizado.json()["unitPrice"] == "7.50"
    assert atualizado.json()["name"] == "Brigadeiro Gourmet"

    assert client.put(f"{API}/produtos/999", json={"name": "Y"}).status_code == 404
    assert client.delete(url).status_code == 204
    assert client.delete(url).status_code == 204
    assert client.get(url).status_code == 404


def test_tables(client, eventos):
    mesa = client.post(f"{API}/mesas/", json={"number": 3})
    assert mesa.status_code == 201
    assert mesa.json() == {"id": mesa.json()["id"], "number": 3, "status": "free"}
    assert client.post(f"{API}/mesas/", json={"number": 3}).status_code == 409

    url = f"{API}/mesas/{mesa.json()['id']}"
    assert client.put(f"{url}/status", json={"status": "reserved"}).json()["status"] == "reserved"
    assert client.put(f"{url}/status", json={"status": "broken"}).status_code == 422
    assert client.put(f"{API}/mesas/999/status", json={"status": "free"}).status_code == 404
    assert client.get(f"{API}/mesas/?status_mesa=reserved").json()[0]["number"] == 3
    assert client.get(f"{url}/comanda").status_code == 404
    assert eventos.nomes() == ["mesa_status_alterado"]


def test_table_three_cash_sale(client, eventos):
    _, brigadeiro, torta = criar_cardapio(client)
    mesa = client.post(f"{API}/mesas/", json={"number": 3}).json()

    resposta = client.post(f"{API}/comandas/", json={"tableId": mesa["id"], "customerName": "Ana"})
    assert resposta.status_code == 201
    comanda = resposta.json()
    assert comanda["status"] == "open"
    assert comanda["total"] is None
    assert comanda["closedAt"] is None
    assert client.get(f"{API}/mesas/{mesa['id']}").json()["status"] == "occupied"
    assert client.get(f"{API}/mesas/{mesa['id']}/comanda").json()["id"] == comanda["id"]

    itens = f"{API}/comandas/{comanda['id']}/itens"
    doces = client.post(itens, json={"productId": brigadeiro["id"], "quantity": 2})
    assert doces.status_code == 201
    assert doces.json()["subtotal"] == "12.00"
    fatia = client.post(itens, json={"productId": torta["id"], "quantity": "0.5"}).json()
    assert fatia == {
        "id": fatia["id"],
        "comandaId": comanda["id"],
        "productId": torta["id"],
        "quantity": "0.500",
        "unitPriceAtTimeOfSale": "130.00",
        "subtotal": "65.00",
    }

    venda = client.post(f"{API}/vendas/", json={
        "comandaId": comanda["id"], "paymentMethod": "cash", "amountReceived": "80.00",
    })
    assert venda.status_code == 201
    assert venda.json()["totalAmount"] == "77.00"
    assert venda.json()["amountReceived"] == "80.00"
    assert venda.json()["change"] == "3.00"
    assert client.get(f"{API}/vendas/{venda.json()['id']}").json()["id"] == venda.json()["id"]

    completa = client.get(f"{API}/comandas/{comanda['id']}").json()
    assert completa["status"] == "closed"
    assert completa["total"] == "77.00"
    assert completa["table"]["number"] == 3
    assert [linha["product"]["name"] for linha in completa["lines"]] == ["Brigadeiro Gourmet", "Torta de Morango"]
    assert client.get(f"{API}/mesas/{mesa['id']}").json()["status"] == "free"
    assert client.get(f"{API}/mesas/{mesa['id']}/comanda").status_code == 404
    assert client.get(f"{API}/produtos/{brigadeiro['id']}").json()["currentStock"] == "118.000"

    assert eventos.nomes() == ["comanda_criada", "item_adicionado", "item_adicionado", "venda_registrada"]

    hoje = datetime.now(timezone.utc).date().isoformat()
    resumo = client.get(f"{API}/relatorios/vendas", params={"de": hoje, "ate": hoje}).json()
    assert resumo["saleCount"] == 1
    assert resumo["totalRevenue"] == "77.00"
    assert resumo["averageTicket"] == "77.00"
    assert resumo["totalUnitsSold"] == "2.500"
    assert resumo["dailyTotals"] == [{"date": hoje, "total": "77.00"}]
    assert resumo["topProducts"][0]["productId"] == brigadeiro["id"]
    assert resumo["topProducts"][0]["quantitySold"] == "2.000"
    assert resumo["topProducts"][0]["product"]["name"] == "Brigadeiro Gourmet"


def test_sale_errors(client):
    _, brigadeiro, _ = criar_cardapio(client)
    comanda = client.post(f"{API}/comandas/", json={}).json()
    vendas = f"{API}/vendas/"

    vazia = client.post(vendas, json={"comandaId": comanda["id"], "paymentMethod": "pix"})
    assert vazia.status_code == 400

    client.post(f"{API}/comandas/{comanda['id']}/itens", json={"productId": brigadeiro["id"], "quantity": 1})
    insuficiente = client.post(vendas, json={
        "comandaId": comanda["id"], "paymentMethod": "cash", "amountReceived": "5.00",
    })
    assert insuficiente.status_code == 400
    assert "insuficiente" in insuficiente.json()["detail"]

    assert client.post(vendas, json={
        "comandaId": comanda["id"], "paymentMethod": "pix", "totalAmount": "0.01",
    }).status_code == 422
    assert client.post(vendas, json={"comandaId": comanda["id"], "paymentMethod": "cheque"}).status_code == 422
    assert client.post(vendas, json={"comandaId": 999, "paymentMethod": "pix"}).status_code == 404

    pix = client.post(vendas, json={"comandaId": comanda["id"], "paymentMethod": "pix", "amountReceived": "50"})
    assert pix.status_code == 201
    assert pix.json()["amountReceived"] is None
    assert pix.json()["change"] is None
    assert client.post(vendas, json={"comandaId": comanda["id"], "paymentMethod": "pix"}).status_code == 409
    assert client.get(f"{API}/vendas/999").status_code == 404


def test_order_lines_and_close(client, eventos):
    _, brigadeiro, torta = criar_cardapio(client)
    mesa = client.post(f"{API}/mesas/", json={"number": 8}).json()
    comanda = client.post(f"{API}/comandas/", json={"tableId": mesa["id"]}).json()
    itens = f"{API}/comandas/{comanda['id']}/itens"

    assert client.post(f"{API}/comandas/", json={"tableId": mesa["id"]}).status_code == 409
    assert client.post(f"{API}/comandas/", json={"tableId": 999}).status_code == 404
    assert client.post(itens, json={"productId": brigadeiro["id"], "quantity": 0}).status_code == 400
    assert client.post(itens, json={"productId": 999, "quantity": 1}).status_code == 404
    assert client.post(f"{API}/comandas/999/itens", json={"productId": brigadeiro["id"], "quantity": 1}).status_code == 404

    item = client.post(itens, json={"productId": brigadeiro["id"], "quantity": 1}).json()
    outro = client.post(itens, json={"productId": torta["id"], "quantity": 1}).json()

    atualizado = client.put(f"{API}/itens/{item['id']}", json={"quantity": 3})
    assert atualizado.json()["subtotal"] == "18.00"
    assert client.put(f"{API}/itens/{item['id']}", json={"quantity": -1}).status_code == 400
    assert client.put(f"{API}/itens/999", json={"quantity": 1}).status_code == 404
    assert client.delete(f"{API}/itens/{outro['id']}").status_code == 204
    assert client.delete(f"{API}/itens/{outro['id']}").status_code == 204

    fechada = client.put(f"{API}/comandas/{comanda['id']}/fechar")
    assert fechada.status_code == 200
    assert fechada.json()["status"] == "closed"
    assert fechada.json()["total"] == "18.00"
    assert fechada.json()["closedAt"] is not None
    assert client.get(f"{API}/mesas/{mesa['id']}").json()["status"] == "free"

    assert client.put(f"{API}/comandas/{comanda['id']}/fechar").status_code == 409
    assert client.post(itens, json={"productId": brigadeiro["id"], "quantity": 1}).status_code == 409
    assert client.put(f"{API}/itens/{item['id']}", json={"quantity": 2}).status_code == 409
    assert client.delete(f"{API}/itens/{item['id']}").status_code == 409
    assert client.get(f"{API}/comandas/999").status_code == 404

    assert eventos.nomes() == [
        "comanda_criada", "item_adicionado", "item_adicionado",
        "item_atualizado", "item_removido", "comanda_fechada",
    ]
    abertas = client.get(f"{API}/comandas/", params={"status_comanda": "open"}).json()
    assert abertas == []


def test_deleted_product_shows_as_null_in_order(client):
    _, brigadeiro, _ = criar_cardapio(client)
    comanda = client.post(f"{API}/comandas/", json={}).json()
    client.post(f"{API}/comandas/{comanda['id']}/itens", json={"productId": brigadeiro["id"], "quantity": 2})
    client.delete(f"{API}/produtos/{brigadeiro['id']}")

    linha = client.get(f"{API}/comandas/{comanda['id']}").json()["lines"][0]

    assert linha["product"] is None
    assert linha["productId"] == brigadeiro["id"]
    assert linha["subtotal"] == "12.00"


def test_report_arguments(client):
    url = f"{API}/relatorios/vendas"
    assert client.get(url, params={"de": "2024-02-01", "ate": "2024-01-01"}).status_code == 400
    assert client.get(url, params={"de": "ontem", "ate": "2024-01-01"}).status_code == 422
    assert client.get(url, params={"de": "2024-01-01"}).status_code == 422

    vazio = client.get(url, params={"de": "2024-01-01", "ate": "2024-01-31"}).json()
    assert vazio == {
        "startDate": "2024-01-01",
        "endDate": "2024-01-31",
        "totalRevenue": "0.00",
        "saleCount": 0,
        "averageTicket": "0.00",
        "totalUnitsSold": "0.000",
        "dailyTotals": [],
        "topProducts": [],
    }


def test_out_of_range_decimals_are_rejected(client):
    categoria, brigadeiro, _ = criar_cardapio(client)
    comanda = client.post(f"{API}/comandas/", json={}).json()
    itens = f"{API}/comandas/{comanda['id']}/itens"

    assert client.post(itens, json={"productId": brigadeiro["id"], "quantity": "1e30"}).status_code == 422
    assert client.post(f"{API}/produtos/", json={
        "name": "Caro", "unitPrice": "1e40", "unitOfMeasure": "unit", "categoryId": categoria["id"],
    }).status_code == 422
    assert client.put(f"{API}/produtos/{brigadeiro['id']}", json={"unitPrice": "100000000"}).status_code == 422

    item = client.post(itens, json={"productId": brigadeiro["id"], "quantity": 1}).json()
    assert client.put(f"{API}/itens/{item['id']}", json={"quantity": "1e30"}).status_code == 422
    assert client.post(f"{API}/vendas/", json={
        "comandaId": comanda["id"], "paymentMethod": "cash", "amountReceived": "1e30",
    }).status_code == 422


def test_line_subtotal_overflow_is_bad_request(client):
    categoria, _, _ = criar_cardapio(client)
    caro = client.post(f"{API}/produtos/", json={
        "name": "Encomenda", "unitPrice": "99999999.00", "unitOfMeasure": "unit", "categoryId": categoria["id"],
    }).json()
    comanda = client.post(f"{API}/comandas/", json={}).json()

    resposta = client.post(f"{API}/comandas/{comanda['id']}/itens", json={"productId": caro["id"], "quantity": 2})

    assert resposta.status_code == 400
    assert client.get(f"{API}/comandas/{comanda['id']}").json()["lines"] == []


def test_product_update_null_fields(client):
    _, brigadeiro, _ = criar_cardapio(client)
    url = f"{API}/produtos/{brigadeiro['id']}"

    for campo in ("name", "unitPrice", "unitOfMeasure", "categoryId", "tracksStock"):
        assert client.put(url, json={campo: None}).status_code == 422
    assert client.get(url).json()["unitPrice"] == "6.00"

    limpo = client.put(url, json={"currentStock": None})
    assert limpo.status_code == 200
    assert limpo.json()["currentStock"] is None
    assert limpo.json()["name"] == "Brigadeiro Gourmet"
