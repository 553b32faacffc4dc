import asyncio

import httpx
import streamlit as st

from brasil_utils.console.api_client import (
    error_detail,
    lookup_cep,
    lookup_cnpj,
    search_cep,
    validate_credentials,
    validate_document,
)

st.set_page_config(page_title="Brasil Utils", page_icon="🇧🇷", layout="wide")

DOCUMENT_LABELS = {
    "cpf": "CPF",
    "cnpj": "CNPJ",
    "cep": "CEP",
    "telefone": "Telefone fixo",
    "celular": "Celular",
}


# -------------- Helpers --------------
def current_auth():
    return st.session_state.get("auth")


def logout():
    if "auth" in st.session_state:
        st.session_state.pop("auth")
    st.rerun()


def show_endereco(endereco: dict):
    st.markdown(f"**{endereco.get('cep')}** – {endereco.get('logradouro')} {endereco.get('complemento')}".strip())
    st.caption(f"{endereco.get('bairro')} · {endereco.get('localidade')}/{endereco.get('uf')} · DDD {endereco.get('ddd')}")


# -------------- UI Sections --------------
st.title("🇧🇷 Brasil Utils Console")
st.caption("Validação de documentos e consultas de CEP/CNPJ (login obrigatório)")


async def main_ui():
    async with httpx.AsyncClient() as client:
        # Gating de autenticação
        if "auth" not in st.session_state:
            st.subheader("🔐 Login")
            with st.form("login_form", clear_on_submit=False):
                user = st.text_input("Usuário", key="login_user")
                pwd = st.text_input("Senha", type="password", key="login_pwd")
                submitted = st.form_submit_button("Entrar")
                if submitted:
                    if not user or not pwd:
                        st.warning("Preencha usuário e senha.")
                    elif await validate_credentials(client, user, pwd):
                        st.session_state["auth"] = (user, pwd)
                        st.success("Autenticado com sucesso.")
                        st.rerun()
                    else:
                        st.error("Credenciais inválidas ou serviço indisponível.")
            st.stop()

        auth = current_auth()
        st.sidebar.markdown(f"**Usuário:** {auth[0]}")
        st.sidebar.button("Sair", on_click=logout)

        tabs = st.tabs(["Validação", "CEP", "Busca por Endereço", "CNPJ", "Sobre"])

        # ---- Tab Validação ----
        with tabs[0]:
            st.subheader("Validar Documento")
            col_type, col_value = st.columns([1, 2])
            with col_type:
                doc_type = st.selectbox("Tipo", list(DOCUMENT_LABELS), format_func=DOCUMENT_LABELS.get)
            with col_value:
                value = st.text_input("Valor (com ou sem formatação)", key="v_value")
            if st.button("Validar", type="primary"):
                ok, data, status = await validate_document(client, auth, doc_type, value)
                if not ok:
                    st.error(f"Erro ({status}): {error_detail(data)}")
                elif data.get("valid"):
                    st.success(f"{DOCUMENT_LABELS[doc_type]} válido: {data.get('formatted')}")
                else:
                    st.warning(f"{DOCUMENT_LABELS[doc_type]} inválido (normalizado: '{data.get('normalized')}')")

        # ---- Tab CEP ----
        with tabs[1]:
            st.subheader("Consultar CEP")
            cep = st.text_input("CEP", key="c_cep", placeholder="01001-000")
            if st.button("Consultar CEP"):
                ok, data, status = await lookup_cep(client, auth, cep)
                if ok:
                    show_endereco(data)
                    with st.expander("Resposta completa"):
                        st.json(data)
                elif status == 404:
                    st.warning(f"Não encontrado: {error_detail(data)}")
                else:
                    st.error(f"Erro ({status}): {error_detail(data)}")

        # ---- Tab Busca por Endereço ----
        with tabs[2]:
            st.subheader("Buscar CEP por Endereço")
            colA, colB, colC = st.columns([1, 2, 2])
            with colA:
                uf = st.text_input("UF", max_chars=2, key="s_uf")
            with colB:
                cidade = st.text_input("Cidade", key="s_cidade")
            with colC:
                logradouro = st.text_input("Logradouro", key="s_logradouro")
            # Validações front-end antes da chamada
            if st.button("Buscar"):
                if len(uf) != 2 or len(cidade) < 3 or len(logradouro) < 3:
                    st.warning("Informe UF com 2 letras e cidade/logradouro com pelo menos 3 caracteres.")
                else:
                    ok, data, status = await search_cep(client, auth, uf, cidade, logradouro)
                    if not ok:
                        st.error(f"Erro ({status}): {error_detail(data)}")
                    elif not data:
                        st.info("Nenhum CEP encontrado.")
                    else:
                        st.caption(f"{len(data)} resultado(s)")
                        for endereco in data:
                            show_endereco(endereco)

        # ---- Tab CNPJ ----
        with tabs[3]:
            st.subheader("Consultar CNPJ")
            cnpj = st.text_input("CNPJ (somente números)", key="e_cnpj")
            if st.button("Consultar CNPJ"):
                ok, data, status = await lookup_cnpj(client, auth, cnpj)
                if ok:
                    st.markdown(f"**{data.get('nome')}** ({data.get('fantasia') or 'sem nome fantasia'})")
                    st.caption(f"Situação: {data.get('situacao')} · Abertura: {data.get('abertura')} · Porte: {data.get('porte')}")
                    with st.expander("Resposta completa"):
                        st.json(data)
                elif status == 404:
                    st.warning(f"Não encontrado: {error_detail(data)}")
                else:
                    st.error(f"Erro ({status}): {error_detail(data)}")

        # ---- Tab Sobre ----
        with tabs[4]:
            st.subheader("Sobre o Projeto")
            st.markdown(
                """
                **Brasil Utils** – Interface de apoio para a API.
                - Validação de CPF, CNPJ, CEP, telefone fixo e celular
                - Consulta de CEP e busca por endereço (ViaCEP)
                - Consulta de CNPJ (ReceitaWS)
                """
            )
            st.caption("Construído com Streamlit + httpx (async)")

asyncio.run(main_ui())
