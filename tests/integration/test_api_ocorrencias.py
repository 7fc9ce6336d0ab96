# tests/integration/test_api_ocorrencias.py

GESTOR = ("gestor", "1234")


def _relato(**kwargs: object) -> dict[str, object]:
    body: dict[str, object] = {
        "tipo": "Produto com defeito",
        "descricao": "Luvas com costura aberta.",
        "itens": [{"item_id": "i4", "observacao": "30 pares"}],
        "anexos": ["foto.jpg"],
    }
    body.update(kwargs)
    return body


def test_relato_criado_201(client):
    resp = client.post("/api/avaliacao/pedidos/OC-2025-002/ocorrencias", json=_relato())
    assert resp.status_code == 201
    data = resp.json()
    assert data["id"].startswith("RP-")
    assert data["segmento"] == "Periféricos"
    assert data["status"] == "Aberto"
    assert data["autor"] == "Usuário do portal"
    assert data["itens_afetados"] == [
        {"nome": "Luvas de proteção (M)", "quantidade": 100, "observacao": "30 pares"},
    ]


def test_relato_sem_itens_422(client):
    resp = client.post(
        "/api/avaliacao/pedidos/OC-2025-002/ocorrencias", json=_relato(itens=[]),
    )
    assert resp.status_code == 422
    assert resp.json()["erros"] == ["Selecione ao menos um item da OC que teve problema."]

    historico = client.get("/api/ocorrencias", params={"pedido_id": "OC-2025-002"}).json()
    assert historico == []


def test_relato_vazio_lista_todas_as_regras(client):
    resp = client.post(
        "/api/avaliacao/pedidos/OC-2025-002/ocorrencias", json={"descricao": " "},
    )
    assert resp.status_code == 422
    assert resp.json()["erros"] == [
        "Selecione o tipo de problema.",
        "Descreva o problema detalhadamente.",
    ]


def test_relato_tipo_desconhecido_422(client):
    resp = client.post(
        "/api/avaliacao/pedidos/OC-2025-002/ocorrencias", json=_relato(tipo="Barulho"),
    )
    assert resp.status_code == 422
    assert "Tipo de problema invalido" in resp.json()["erros"][0]


def test_relato_pedido_inexistente_404(client):
    resp = client.post("/api/avaliacao/pedidos/ZZZ-000/ocorrencias", json=_relato())
    assert resp.status_code == 404


def test_historico_filtrado(client):
    resp = client.get("/api/ocorrencias", params={"segmento": "Logística"})
    assert resp.status_code == 200
    assert [o["id"] for o in resp.json()] == ["RP-2025-0043"]
    assert resp.json()[0]["qtd_anexos"] == 2

    resp = client.get("/api/ocorrencias", params={"status": "Aberto"})
    assert resp.json() == []

    resp = client.get("/api/ocorrencias", params={"tipo": "Atraso na entrega"})
    assert len(resp.json()) == 1


def test_historico_status_invalido_422(client):
    assert client.get("/api/ocorrencias", params={"status": "Perdido"}).status_code == 422


def test_avanco_de_status_pelo_gestor(client):
    criada = client.post(
        "/api/avaliacao/pedidos/OC-2025-002/ocorrencias", json=_relato(),
    ).json()
    resp = client.post(f"/api/gestao/ocorrencias/{criada['id']}/avanco", auth=GESTOR)
    assert resp.status_code == 200
    assert resp.json()["status"] == "Em análise"


def test_avanco_de_ocorrencia_fechada_422(client):
    resp = client.post("/api/gestao/ocorrencias/RP-2025-0043/avanco", auth=GESTOR)
    assert resp.status_code == 422
