# tests/integration/test_api_gestao.py

GESTOR = ("gestor", "1234")


def test_login_valido(client):
    resp = client.post("/api/gestao/login", json={"usuario": "gestor", "senha": "1234"})
    assert resp.status_code == 200
    assert resp.json() == {"autenticado": True, "usuario": "gestor"}


def test_login_invalido_401(client):
    resp = client.post("/api/gestao/login", json={"usuario": "gestor", "senha": "0000"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Usuário ou senha inválidos."


def test_rotas_de_gestao_exigem_credencial(client):
    resp = client.get("/api/gestao/painel")
    assert resp.status_code == 401
    assert resp.headers["WWW-Authenticate"] == "Basic"

    resp = client.get("/api/gestao/painel", auth=("gestor", "errada"))
    assert resp.status_code == 401

    resp = client.post("/api/gestao/fornecedores/1/advertencias")
    assert resp.status_code == 401


def test_painel(client):
    resp = client.get("/api/gestao/painel", auth=GESTOR)
    assert resp.status_code == 200
    assert resp.json() == {
        "total_fornecedores": 6,
        "bloqueados": 2,
        "nota_baixa": 2,
        "reclamacoes_pendentes": 3,
    }


def test_lista_de_fornecedores_com_busca(client):
    resp = client.get("/api/gestao/fornecedores", auth=GESTOR)
    assert len(resp.json()) == 6
    resp = client.get("/api/gestao/fornecedores", params={"q": "tecno"}, auth=GESTOR)
    assert [f["id"] for f in resp.json()] == ["3"]


def test_advertencia_com_motivo(client):
    resp = client.post(
        "/api/gestao/fornecedores/2/advertencias",
        json={"motivo": "Entrega incompleta"},
        auth=GESTOR,
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["advertencias"] == 2
    assert data["historico_advertencias"][-1]["motivo"] == "Entrega incompleta"
    assert data["historico_advertencias"][-1]["gestor"] == "gestor"


def test_advertencia_sem_corpo_usa_motivo_padrao(client):
    resp = client.post("/api/gestao/fornecedores/3/advertencias", auth=GESTOR)
    assert resp.status_code == 200
    assert resp.json()["historico_advertencias"][0]["motivo"] == (
        "Penalidade aplicada manualmente pelo gestor via Central."
    )


def test_terceira_advertencia_bloqueia(client):
    resp = client.post(
        "/api/gestao/fornecedores/4/advertencias", json={"motivo": "Reincidencia"}, auth=GESTOR,
    )
    assert resp.json()["bloqueado"] is True
    assert resp.json()["estado_penalidade"] == "BLOQUEADO"

    painel = client.get("/api/gestao/painel", auth=GESTOR).json()
    assert painel["bloqueados"] == 3


def test_advertencia_em_bloqueado_409(client):
    resp = client.post("/api/gestao/fornecedores/9/advertencias", auth=GESTOR)
    assert resp.status_code == 409
    assert resp.json()["detail"] == "Validacao falhou"
    assert resp.json()["erros"] == ["Fornecedor 9 ja esta bloqueado."]


def test_reset_de_advertencias(client):
    resp = client.delete("/api/gestao/fornecedores/9/advertencias", auth=GESTOR)
    assert resp.status_code == 200
    data = resp.json()
    assert data["advertencias"] == 0
    assert data["bloqueado"] is False
    assert data["historico_advertencias"] == []

    ficha = client.get("/api/fornecedores/9").json()
    assert ficha["fornecedor"]["historico_advertencias"] == []


def test_bloqueio_manual(client):
    resp = client.post("/api/gestao/fornecedores/1/bloqueio", auth=GESTOR)
    assert resp.status_code == 200
    assert resp.json()["bloqueado"] is True
    assert resp.json()["advertencias"] == 0


def test_penalidade_fornecedor_inexistente_404(client):
    resp = client.post("/api/gestao/fornecedores/999/bloqueio", auth=GESTOR)
    assert resp.status_code == 404


def test_reclamacoes_e_resposta(client):
    resp = client.get("/api/gestao/reclamacoes", params={"status": "Pendente"}, auth=GESTOR)
    assert [r["id"] for r in resp.json()] == ["REC-001", "REC-002", "REC-003"]

    resp = client.post(
        "/api/gestao/reclamacoes/REC-003/resposta",
        json={"email": "vendas@madeiras.com", "texto": "Favor substituir a carga."},
        auth=GESTOR,
    )
    assert resp.status_code == 200
    assert resp.json()["status"] == "Respondido"

    resp = client.get("/api/gestao/reclamacoes", params={"status": "Respondido"}, auth=GESTOR)
    assert [r["id"] for r in resp.json()] == ["REC-003"]


def test_resposta_sem_texto_422(client):
    resp = client.post(
        "/api/gestao/reclamacoes/REC-001/resposta",
        json={"email": "compras@fornecedor.com.br"},
        auth=GESTOR,
    )
    assert resp.status_code == 422
    assert resp.json()["erros"] == ["Escreva o texto da resposta."]


def test_analise_preditiva(client, gerador):
    gerador.texto = "Risco moderado de bloqueio."
    resp = client.post("/api/gestao/fornecedores/4/analise", auth=GESTOR)
    assert resp.status_code == 200
    assert resp.json() == {"fornecedor_id": "4", "parecer": "Risco moderado de bloqueio."}


def test_analise_gerador_fora_do_ar_502(client, gerador):
    gerador.falhar = True
    resp = client.post("/api/gestao/fornecedores/4/analise", auth=GESTOR)
    assert resp.status_code == 502
