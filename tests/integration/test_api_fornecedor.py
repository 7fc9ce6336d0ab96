# tests/integration/test_api_fornecedor.py


def test_ficha_completa(client):
    resp = client.get("/api/fornecedores/2")
    assert resp.status_code == 200
    data = resp.json()
    f = data["fornecedor"]
    assert f["nome"] == "Indústria & Cia ME"
    assert f["contato"] == "contato@industriacia.com.br"
    assert f["criterios"] == {"qualidade": 4.0, "entrega": 4.5, "suporte": 4.0}
    assert [i["id"] for i in f["itens"]] == ["i4", "i5"]
    assert f["advertencias"] == 1
    assert f["estado_penalidade"] == "ATIVO"
    assert f["historico_advertencias"][0]["gestor"] == "Carlos Gestor"
    assert data["pedidos"] == ["FLUIG-987654", "OC-2025-002"]


def test_ficha_lista_ocorrencias_vinculadas(client):
    data = client.get("/api/fornecedores/1").json()
    assert [o["id"] for o in data["ocorrencias"]] == ["RP-2025-0043"]
    assert data["ocorrencias"][0]["status"] == "Fechado"


def test_ficha_inexistente_404(client):
    resp = client.get("/api/fornecedores/999")
    assert resp.status_code == 404
    assert "999" in resp.json()["detail"]


def test_ficha_sinaliza_cnpj_ficticio(client):
    f = client.get("/api/fornecedores/1").json()["fornecedor"]
    assert f["cnpj"] == "12.345.678/0001-90"
    assert f["cnpj_valido"] is False
