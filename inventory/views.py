# inventory/views.py
from rest_framework.views import APIView
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
from utils.exceptions import ServiceError
from .serializers import StockSerializer
from .services import upsert_stocks, delete_stock, list_stocks, count_objects
import logging

logger = logging.getLogger(__name__)


class StockListView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        serializer = StockSerializer(list_stocks(), many=True)
        return Response(serializer.data)

    def post(self, request):
        try:
            upsert_stocks(request.data)
        except ServiceError as e:
            return Response({'message': e.message}, status=e.status_code)
        except Exception as e:
            logger.error(f"❌ Error updating stock: {e}")
            return Response({
                'message': 'Error updating stock',
                'error': str(e)
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({'message': 'Stock updated successfully'})


class StockDetailView(APIView):
    permission_classes = [AllowAny]

    def delete(self, request, item):
        try:
            delete_stock(item)
        except Exception as e:
            logger.error(f"❌ Error deleting stock item '{item}': {e}")
            return Response({
                'message': 'Error deleting stock',
                'error': str(e)
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({'message': f"Deleted {item} successfully"})


@api_view(['POST'])
@permission_classes([AllowAny])
def count_objects_view(request):
    data = request.data
    try:
        count_objects(
            user_id=data.get('userId'),
            stock_item=data.get('stockItem'),
            counted_amount=data.get('countedAmount'),
        )
    except ServiceError as e:
        return Response({'message': e.message}, status=e.status_code)
    except Exception as e:
        logger.error(f"❌ Error logging object count: {e}")
        return Response({
            'message': 'Error logging object count',
            'error': str(e)
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response({'message': 'Object count logged and stock updated successfully'})
