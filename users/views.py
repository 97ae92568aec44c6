# users/views.py
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
from utils.exceptions import ServiceError
from .services import register_user, login_user
import logging

logger = logging.getLogger(__name__)


class RegisterView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        data = request.data
        try:
            token = register_user(
                email=data.get('email'),
                password=data.get('password'),
                full_name=data.get('fullName'),
            )
        except ServiceError as e:
            return Response({'message': e.message}, status=e.status_code)
        except Exception as e:
            logger.error(f"❌ Registration error: {e}")
            return Response({
                'message': 'Something went wrong.',
                'error': str(e)
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({
            'message': 'Registration successful!',
            'token': token
        }, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        data = request.data
        try:
            token, user = login_user(
                email=data.get('email'),
                password=data.get('password'),
            )
        except ServiceError as e:
            return Response({'message': e.message}, status=e.status_code)
        except Exception as e:
            logger.error(f"❌ Login error: {e}")
            return Response({
                'message': 'Internal server error',
                'error': str(e)
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({
            'message': 'Login Successful!',
            'token': token,
            'userId': str(user.id)
        }, status=status.HTTP_200_OK)
