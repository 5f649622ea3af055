"""FastAPI application for the guest menu and the admin dashboard API."""

from fastapi import Depends, FastAPI, Header, HTTPException, Query
from pydantic import BaseModel

from restaurant_menu_service.auth.admin_session import AdminSessionStore
from restaurant_menu_service.auth.api_dependencies import get_session_token_from_header
from restaurant_menu_service.models.menu_models import (
    LANGUAGES,
    Catalog,
    FoodItem,
    ItemFields,
    Language,
    MultilingualText,
)
from restaurant_menu_service.models.query_models import (
    ALL_CATEGORIES,
    AvailabilityFilter,
    CatalogQuery,
    SortOrder,
)
from restaurant_menu_service.services.catalog_store import CatalogStore
from restaurant_menu_service.services.curation_service import CurationResult, CurationService
from restaurant_menu_service.services.exceptions import (
    ConfirmationRequiredError,
    MenuServiceError,
    MenuValidationError,
    NotFoundError,
    RecordBusyError,
)
from restaurant_menu_service.services.guest_service import GuestMenu, guest_menu
from restaurant_menu_service.services.query_service import query_items


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str


class LanguageResponse(BaseModel):
    """Display metadata for a menu language."""

    code: Language
    name: str
    label: str
    flag: str
    direction: str


class LoginRequest(BaseModel):
    """Admin login form."""

    username: str
    password: str


class LoginResponse(BaseModel):
    """Session token for the X-Admin-Session header."""

    token: str


class CategoryRequest(BaseModel):
    """Body for creating or renaming a category."""

    name: MultilingualText


class TranslateRequest(BaseModel):
    """Body for an on-demand translation preview."""

    text: str


class TranslateResponse(BaseModel):
    """Translation preview; ``translation`` is None when unavailable."""

    available: bool
    translation: MultilingualText | None = None


class MutationResponse(BaseModel):
    """Response model for curation operations.

    ``persisted`` and ``translation_complete`` are non-blocking notices: the
    change was accepted either way.
    """

    record_id: str
    persisted: bool
    translation_complete: bool
    catalog: Catalog


ERROR_STATUS: dict[type[MenuServiceError], int] = {
    NotFoundError: 404,
    MenuValidationError: 422,
    ConfirmationRequiredError: 400,
    RecordBusyError: 409,
}


def to_http_exception(error: MenuServiceError) -> HTTPException:
    """Map a domain error to an HTTP error response.

    Args:
        error: Error raised by a service

    Returns:
        HTTPException with the matching status code
    """
    status_code = next(
        (code for kind, code in ERROR_STATUS.items() if isinstance(error, kind)), 400
    )
    return HTTPException(status_code=status_code, detail=str(error))


def to_mutation_response(result: CurationResult) -> MutationResponse:
    return MutationResponse(
        record_id=result.record_id,
        persisted=result.persisted,
        translation_complete=result.translation_complete,
        catalog=result.catalog,
    )


def create_app(
    store: CatalogStore,
    curation_service: CurationService,
    sessions: AdminSessionStore,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Holder of the current catalog
        curation_service: Service for curating categories and items
        sessions: Admin session store

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Restaurant Menu Service API",
        description="Multilingual guest menu and admin API for curating categories and dishes",
        version="1.0.0",
    )

    # Store services in app state for access in route handlers
    app.state.store = store
    app.state.curation_service = curation_service
    app.state.sessions = sessions

    def require_admin(x_admin_session: str | None = Header(None)) -> str:
        """Dependency to check the admin session."""
        return get_session_token_from_header(
            x_admin_session=x_admin_session, sessions=app.state.sessions
        )

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy")

    # Guest surface

    @app.get("/menu/languages", response_model=list[LanguageResponse], tags=["Guest"])
    async def list_languages() -> list[LanguageResponse]:
        """List the languages a guest can pick, in display order."""
        return [
            LanguageResponse(
                code=info.code,
                name=info.name,
                label=info.label,
                flag=info.flag,
                direction=info.direction,
            )
            for info in LANGUAGES
        ]

    @app.get("/menu", response_model=GuestMenu, tags=["Guest"])
    async def get_guest_menu(
        lang: Language = Language.EN,
        category: str | None = None,
    ) -> GuestMenu:
        """Get the guest menu in one language.

        Args:
            lang: Language selected by the guest
            category: Category tab; defaults to the first category

        Returns:
            Available dishes of the tab with text in the selected language
        """
        return guest_menu(app.state.store.current, lang, category)

    # Admin session

    @app.post("/admin/login", response_model=LoginResponse, tags=["Admin Session"])
    async def login(body: LoginRequest) -> LoginResponse:
        """Open an admin session.

        Raises:
            HTTPException: 401 if the credentials are wrong
        """
        token = app.state.sessions.login(body.username, body.password)
        if token is None:
            raise HTTPException(status_code=401, detail="Invalid credentials")
        return LoginResponse(token=token)

    @app.post("/admin/logout", status_code=204, tags=["Admin Session"])
    async def logout(token: str = Depends(require_admin)) -> None:
        """Close the current admin session."""
        app.state.sessions.logout(token)

    # Admin catalog

    @app.get("/admin/catalog", response_model=Catalog, tags=["Admin Catalog"])
    async def get_catalog(_token: str = Depends(require_admin)) -> Catalog:
        """Get the full catalog."""
        catalog: Catalog = app.state.store.current
        return catalog

    @app.get("/admin/items", response_model=list[FoodItem], tags=["Admin Catalog"])
    async def list_items(
        category: str = ALL_CATEGORIES,
        search: str = "",
        availability: AvailabilityFilter = AvailabilityFilter.ALL,
        sort: SortOrder = SortOrder.DEFAULT,
        _token: str = Depends(require_admin),
    ) -> list[FoodItem]:
        """List items filtered by category, name search and availability.

        Args:
            category: "all" or a category id
            search: Text matched against the item name in every language
            availability: all, available or hidden
            sort: default (special offers first), ascending or descending by name

        Returns:
            Matching items in display order
        """
        query = CatalogQuery(
            category_filter=category,
            search_term=search,
            availability_filter=availability,
            sort_order=sort,
        )
        return query_items(app.state.store.current, query)

    @app.post("/admin/categories", response_model=MutationResponse, status_code=201, tags=["Admin Catalog"])
    async def add_category(
        body: CategoryRequest, _token: str = Depends(require_admin)
    ) -> MutationResponse:
        """Create a category, translating its name where slots are empty."""
        try:
            result = await app.state.curation_service.add_category(body.name)
        except MenuServiceError as e:
            raise to_http_exception(e) from e
        return to_mutation_response(result)

    @app.put("/admin/categories/{category_id}", response_model=MutationResponse, tags=["Admin Catalog"])
    async def edit_category(
        category_id: str, body: CategoryRequest, _token: str = Depends(require_admin)
    ) -> MutationResponse:
        """Rename a category."""
        try:
            result = await app.state.curation_service.edit_category(category_id, body.name)
        except MenuServiceError as e:
            raise to_http_exception(e) from e
        return to_mutation_response(result)

    @app.delete("/admin/categories/{category_id}", response_model=MutationResponse, tags=["Admin Catalog"])
    async def delete_category(
        category_id: str,
        confirm: bool = Query(False),
        _token: str = Depends(require_admin),
    ) -> MutationResponse:
        """Delete a category; its items keep their (now dangling) reference.

        Raises:
            HTTPException: 400 unless ``confirm=true`` is passed
        """
        try:
            result = app.state.curation_service.delete_category(category_id, confirmed=confirm)
        except MenuServiceError as e:
            raise to_http_exception(e) from e
        return to_mutation_response(result)

    @app.post("/admin/items", response_model=MutationResponse, status_code=201, tags=["Admin Catalog"])
    async def add_item(body: ItemFields, _token: str = Depends(require_admin)) -> MutationResponse:
        """Create a dish, translating its name and description where slots are empty."""
        try:
            result = await app.state.curation_service.add_item(body)
        except MenuServiceError as e:
            raise to_http_exception(e) from e
        return to_mutation_response(result)

    @app.put("/admin/items/{item_id}", response_model=MutationResponse, tags=["Admin Catalog"])
    async def edit_item(
        item_id: str, body: ItemFields, _token: str = Depends(require_admin)
    ) -> MutationResponse:
        """Update the provided fields of a dish."""
        try:
            result = await app.state.curation_service.edit_item(item_id, body)
        except MenuServiceError as e:
            raise to_http_exception(e) from e
        return to_mutation_response(result)

    @app.delete("/admin/items/{item_id}", response_model=MutationResponse, tags=["Admin Catalog"])
    async def delete_item(
        item_id: str,
        confirm: bool = Query(False),
        _token: str = Depends(require_admin),
    ) -> MutationResponse:
        """Delete a dish.

        Raises:
            HTTPException: 400 unless ``confirm=true`` is passed
        """
        try:
            result = app.state.curation_service.delete_item(item_id, confirmed=confirm)
        except MenuServiceError as e:
            raise to_http_exception(e) from e
        return to_mutation_response(result)

    @app.post("/admin/translate", response_model=TranslateResponse, tags=["Admin Catalog"])
    async def translate(
        body: TranslateRequest, _token: str = Depends(require_admin)
    ) -> TranslateResponse:
        """Preview the translation of a string for the admin form."""
        translation = await app.state.curation_service.preview_translation(body.text)
        return TranslateResponse(available=translation is not None, translation=translation)

    return app
