"""URL routes of the explorer app."""

from django.urls import path

from server.apps.explorer import views

app_name = 'explorer'

urlpatterns = [
    path('click/', views.file_click, name='click'),
    path('editor/', views.editor_handoff, name='onlyoffice'),
    path(
        'share/<str:share_batch_num>/copy/',
        views.share_link_copy,
        name='copy-share-link',
    ),
]
