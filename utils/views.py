from django.http import HttpResponse


def welcome(request):
    return HttpResponse("Welcome to the stock counting API!", content_type="text/plain")
