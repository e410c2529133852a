"""HTTP handlers (views) for the canteen menu and food tokens."""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from canteen.dependencies import get_canteen_service
from canteen.domain import MealType, MenuCategory
from canteen.domain.errors import ErrorCode
from canteen.handlers.serializers import (
    DailyMenuSerializer,
    DailyMenuUpdateSerializer,
    FoodTokenCreateSerializer,
    FoodTokenFilterSerializer,
    FoodTokenSerializer,
    MenuDateSerializer,
    MenuItemCreateSerializer,
    MenuItemSerializer,
)
from eduevent.handlers import DomainAPIView

ERROR_STATUSES = {
    ErrorCode.INVALID_MENU_ITEM: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UNKNOWN_MENU_ITEM: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MENU_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TOKEN_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ITEM_NOT_ON_MENU: status.HTTP_409_CONFLICT,
    ErrorCode.TOKEN_NOT_VALID_TODAY: status.HTTP_409_CONFLICT,
    ErrorCode.TOKEN_ALREADY_VALIDATED: status.HTTP_409_CONFLICT,
}


class CanteenAPIView(DomainAPIView):
    error_statuses = ERROR_STATUSES


def _menu_date(menu_date: str):
    serializer = MenuDateSerializer(data={"date": menu_date})
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data["date"]


class MenuItemListView(CanteenAPIView):
    """Handler for GET/POST /api/canteen/items"""

    def get(self, request: Request) -> Response:
        items = get_canteen_service().list_menu_items()
        return Response(MenuItemSerializer(items, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = MenuItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        item = get_canteen_service().add_menu_item(
            name=data["name"],
            price=data["price"],
            category=MenuCategory(data["category"]),
            is_veg=data["is_veg"],
            description=data.get("description"),
        )
        return Response(MenuItemSerializer(item).data, status=status.HTTP_201_CREATED)


class DailyMenuView(CanteenAPIView):
    """Handler for GET/PUT /api/canteen/menus/{date}"""

    def get(self, request: Request, menu_date: str) -> Response:
        menu = get_canteen_service().get_daily_menu(_menu_date(menu_date))
        return Response(DailyMenuSerializer(menu).data)

    def put(self, request: Request, menu_date: str) -> Response:
        serializer = DailyMenuUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        menu = get_canteen_service().set_daily_menu(_menu_date(menu_date), **serializer.validated_data)
        return Response(DailyMenuSerializer(menu).data)


class FoodTokenListView(CanteenAPIView):
    """Handler for GET/POST /api/canteen/tokens"""

    def get(self, request: Request) -> Response:
        serializer = FoodTokenFilterSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        tokens = get_canteen_service().list_user_tokens(
            serializer.validated_data["user_id"],
            serializer.validated_data.get("date"),
        )
        return Response(FoodTokenSerializer(tokens, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = FoodTokenCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        token = get_canteen_service().generate_token(
            data["user_id"],
            data["menu_item_id"],
            MealType(data["meal_type"]),
            data["valid_on"],
        )
        return Response(FoodTokenSerializer(token).data, status=status.HTTP_201_CREATED)


class FoodTokenValidateView(CanteenAPIView):
    """Handler for POST /api/canteen/tokens/{token_id}/validate"""

    def post(self, request: Request, token_id: str) -> Response:
        token = get_canteen_service().validate_token(token_id)
        return Response(FoodTokenSerializer(token).data)
