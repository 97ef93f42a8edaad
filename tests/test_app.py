import asyncio

import pytest

from school_console.domain.entities import Severity, UserRole
from school_console.interfaces.app import PASSWORD_RULES, AuthPage, ConsoleApp
from school_console.interfaces.navigation import MENU, Navigator, Route, ViewName
from school_console.interfaces.views import DashboardView, EntityView, TeacherDetailsView
from school_console.main import build_context, create_app


def errors(app):
    return [n.message for n in app.notifications.active if n.severity is Severity.ERROR]


@pytest.mark.asyncio
async def test_login_opens_dashboard(app):
    """Тест входа администратора"""
    assert await app.login("admin@school.edu", "password") is True

    assert app.user.role == UserRole.ADMIN
    assert app.auth_loading is False
    assert app.navigator.route.name is ViewName.DASHBOARD
    assert isinstance(app.navigator.view, DashboardView)
    assert app.navigator.view.stats.students == 2
    assert "Logged in successfully" in [n.message for n in app.notifications.active]


@pytest.mark.asyncio
async def test_login_wrong_password(app):
    """Тест входа с неверным паролем"""
    assert await app.login("admin@school.edu", "wrong") is False

    assert app.user is None
    assert app.navigator is None
    assert app.auth_loading is False
    assert errors(app) == ["Invalid credentials"]


@pytest.mark.asyncio
async def test_register_validation(app):
    """Тест клиентской проверки формы регистрации"""
    assert await app.register("Jane", "jane@school.edu", "secret1", "secret2") is False
    assert await app.register("Jane", "jane@school.edu", "123", "123") is False
    assert await app.register("", "jane@school.edu", "secret1", "secret1") is False

    assert errors(app) == ["Passwords do not match", PASSWORD_RULES, PASSWORD_RULES]
    assert app.user is None


@pytest.mark.asyncio
async def test_register_duplicate(app):
    """Тест регистрации с существующим email"""
    assert await app.register("Admin", "admin@school.edu", "secret1", "secret1") is False
    assert errors(app) == ["User already exists"]


@pytest.mark.asyncio
async def test_register_logs_in_then_login_again(app):
    """Тест: регистрация сразу авторизует, потом можно войти снова"""
    app.show_register()
    assert app.auth_page is AuthPage.REGISTER

    assert await app.register("Jane Roe", "jane@school.edu", "secret1", "secret1") is True
    assert app.user.role == UserRole.USER
    assert app.navigator is not None

    app.logout()
    assert await app.login("jane@school.edu", "secret1") is True
    assert app.user.email == "jane@school.edu"


@pytest.mark.asyncio
async def test_navigation_between_views(app):
    """Тест переходов по меню"""
    await app.login("admin@school.edu", "password")
    nav = app.navigator

    for name in MENU[1:]:
        await nav.navigate(name)
        assert nav.route.name is name
        assert isinstance(nav.view, EntityView)
        assert nav.view.capability.plural == name.value
        assert nav.view.loaded

    await nav.navigate("departments")
    assert nav.route.name is ViewName.DEPARTMENTS


@pytest.mark.asyncio
async def test_teacher_details_and_back(app):
    """Тест перехода в карточку преподавателя и обратно"""
    await app.login("admin@school.edu", "password")
    nav = app.navigator
    await nav.navigate(ViewName.TEACHERS)

    await nav.open_teacher_details(nav.view.rows[0].id)
    assert nav.route.name is ViewName.TEACHER_DETAILS
    assert isinstance(nav.view, TeacherDetailsView)
    assert nav.view.teacher.first_name == "Dr. Emily"

    await nav.back()
    assert nav.route.name is ViewName.TEACHERS
    await nav.back()
    assert nav.route.name is ViewName.DASHBOARD


@pytest.mark.asyncio
async def test_missing_teacher_falls_back_to_list(app):
    """Тест: несуществующий преподаватель возвращает к списку"""
    await app.login("admin@school.edu", "password")
    nav = app.navigator

    await nav.open_teacher_details("missing")

    assert nav.route == Route(ViewName.TEACHERS)
    assert isinstance(nav.view, EntityView)
    assert "Teacher not found" in errors(app)


@pytest.mark.asyncio
async def test_teacher_details_needs_id(app):
    """Тест: карточка требует id"""
    await app.login("admin@school.edu", "password")
    with pytest.raises(ValueError):
        await app.navigator.navigate(ViewName.TEACHER_DETAILS)
    with pytest.raises(ValueError):
        await app.navigator.open_teacher_details("")


@pytest.mark.asyncio
async def test_logout_discards_view_state(app):
    """Тест выхода: состояние экранов сбрасывается"""
    await app.login("admin@school.edu", "password")
    await app.navigator.navigate(ViewName.STUDENTS)
    view = app.navigator.view
    view.open_create()

    app.logout()

    assert app.user is None
    assert app.navigator is None
    assert app.auth_page is AuthPage.LOGIN
    assert view.modal is None

    await app.login("admin@school.edu", "password")
    assert app.navigator.route.name is ViewName.DASHBOARD


@pytest.mark.asyncio
async def test_navigator_close(context):
    """Тест закрытия навигатора"""
    nav = Navigator(context)
    await nav.navigate(ViewName.DEPARTMENTS)
    nav.close()
    assert nav.view is None
    assert nav.route is None


def test_create_app_uses_settings(test_settings):
    """Тест фабрики приложения"""
    console = create_app(test_settings, configure=False)
    assert isinstance(console, ConsoleApp)
    assert console.context.settings is test_settings
    assert console.notifications.ttl == test_settings.NOTIFICATION_TTL_SECONDS
    assert console.context.facade.store.latency_ms == 0
    assert test_settings.PASSWORD_HASH_ROUNDS == 1000


@pytest.mark.asyncio
@pytest.mark.parametrize("teacher_id", ["1", "missing"])
async def test_menu_click_while_teacher_details_loading(test_settings, teacher_id):
    """Тест: переход по меню во время загрузки карточки не перебивается ею"""
    ctx = build_context(test_settings.model_copy(update={"STORE_LATENCY_MS": 20}))
    nav = Navigator(ctx)

    details = asyncio.ensure_future(nav.open_teacher_details(teacher_id))
    await asyncio.sleep(0.005)
    await nav.navigate(ViewName.DEPARTMENTS)
    await details

    assert nav.route == Route(ViewName.DEPARTMENTS)
    assert isinstance(nav.view, EntityView)
    assert nav.view.capability.plural == "departments"
    assert "Teacher not found" not in [n.message for n in ctx.notifications.active]
    ctx.notifications.close()
