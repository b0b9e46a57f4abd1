import sys
import os
import logging
import streamlit as st

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from storefront.config import StorefrontConfig
from storefront.ftypes import Either
from storefront.logging_config import setup_logging
from storefront.selectors import (
    select_cart_items,
    select_cart_total,
    select_featured_products,
    select_is_authenticated,
    select_products,
    select_user,
)
from storefront.service import StorefrontService
from storefront.store import create_store, observe

logger = logging.getLogger("storefront.app")


# ============ Кэширование данных ============
@st.cache_resource
def get_config() -> StorefrontConfig:
    config = StorefrontConfig.from_env()
    setup_logging(config.log_level)
    return config


@st.cache_data(ttl=600)
def get_catalog(config: StorefrontConfig) -> Either:
    return config.fetch_catalog()


def cached_catalog() -> Either:
    """Кэшируются только успешные загрузки"""
    result = get_catalog(config)
    if result.is_left:
        get_catalog.clear()
    return result


# ============ Инициализация ============
st.set_page_config(
    page_title="Storefront",
    page_icon="🛒",
    layout="wide",
    initial_sidebar_state="expanded",
)

config = get_config()

# Отдельный Store на каждую сессию браузера
if "store" not in st.session_state:
    st.session_state.store = create_store()
    observe(
        st.session_state.store,
        lambda keys: logger.debug("state changed: %s", ", ".join(keys)),
    )

service = StorefrontService(st.session_state.store, fetch_catalog=cached_catalog)
store = service.store

if not select_products(store.get_state()):
    if not service.refresh_catalog():
        st.warning("Каталог временно недоступен")


# ============ Вспомогательные функции ============
def format_price(price) -> str:
    return f"${price:.2f}"


def product_card(product, key_prefix: str) -> None:
    """Карточка товара с кнопкой добавления в корзину"""
    with st.container(border=True):
        if product.image:
            st.image(product.image)
        st.markdown(f"**{product.title}**")
        st.caption(product.description)
        st.markdown(f"### {format_price(product.price)}")
        if st.button("Add to Cart", key=f"{key_prefix}_{product.id}"):
            service.add_to_cart(product)
            st.toast(f"{product.title} has been added to your cart!")


def product_grid(products, key_prefix: str, columns: int = 3) -> None:
    cols = st.columns(columns)
    for idx, product in enumerate(products):
        with cols[idx % columns]:
            product_card(product, key_prefix)


# ============ SIDEBAR - Навигация ============
with st.sidebar:
    st.header("🛒 Storefront")
    page = st.radio(
        "Navigation",
        ["Home", "Products", "Cart", "Login"],
        label_visibility="collapsed",
    )


# ============ PAGE: HOME ============
if page == "Home":
    st.title("Welcome to Our E-Commerce Store")
    st.write("Shop the best products at amazing prices")

    st.header("Featured Products")
    featured = select_featured_products(store.get_state(), config.featured_count)
    if featured:
        product_grid(featured, "featured", columns=4)
    else:
        st.info("No products yet.")

    st.divider()
    st.subheader("Don't Miss Out on Our Exclusive Offers!")
    st.write("Sign up today to receive special discounts and exclusive deals.")


# ============ PAGE: PRODUCTS ============
elif page == "Products":
    st.header("Products")
    if st.button("🔄 Refresh catalog"):
        get_catalog.clear()
        if not service.refresh_catalog():
            st.warning("Каталог временно недоступен")
    product_grid(select_products(store.get_state()), "catalog")


# ============ PAGE: CART ============
elif page == "Cart":
    st.header("Your Cart")
    state = store.get_state()
    cart_items = select_cart_items(state)

    if not cart_items:
        st.info("Your cart is empty")
    else:
        # Дубликаты - отдельные строки, ключ по позиции
        for idx, item in enumerate(cart_items):
            cols = st.columns([1, 5, 2, 1])
            with cols[0]:
                if item.image:
                    st.image(item.image, width=64)
            with cols[1]:
                st.write(f"**{item.title}**")
            with cols[2]:
                st.write(f"Price: {format_price(item.price)}")
            with cols[3]:
                if st.button("Remove", key=f"remove_{item.id}_{idx}"):
                    service.remove_from_cart(item.id)
                    st.rerun()

        st.divider()
        st.markdown(f"### Total: **{format_price(select_cart_total(state))}**")


# ============ PAGE: LOGIN ============
elif page == "Login":
    st.header("Login")
    with st.form("login_form"):
        email = st.text_input("Email", placeholder="Email")
        password = st.text_input("Password", type="password", placeholder="Password")
        submitted = st.form_submit_button("Login", use_container_width=True)

    if submitted:
        if not email:
            st.error("Email is required")
        else:
            user = service.login(email, password)
            st.success(f"Welcome, {user.name or user.email}!")


# ============ SIDEBAR - Сессия и корзина ============
# После страницы: dispatch из тела страницы уже применён
with st.sidebar:
    st.divider()
    state = store.get_state()
    st.metric("Cart", len(select_cart_items(state)))
    if select_is_authenticated(state):
        st.caption(f"Signed in as **{select_user(state).map(lambda u: u.email).get_or_else('')}**")
        if st.button("Logout"):
            service.logout()
            st.rerun()
