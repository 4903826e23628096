from django.urls import path

from . import views

app_name = "content"

urlpatterns = [
    # Public pages
    path("", views.HomeView.as_view(), name="home"),
    path("news/", views.NewsView.as_view(), name="news"),
    path("gallery/", views.GalleryView.as_view(), name="gallery"),
    path("gallery/<int:pk>/", views.GalleryDetailView.as_view(), name="gallery_detail"),
    path("programs/", views.ProgramsView.as_view(), name="programs"),
    path("cultural-programs/", views.CulturalProgramsView.as_view(), name="cultural_programs"),

    # News management
    path("manage/news/", views.NewsManageListView.as_view(), name="news_manage"),
    path("manage/news/create/", views.NewsFormView.as_view(), name="news_create"),
    path("manage/news/<int:pk>/update/", views.NewsFormView.as_view(), name="news_update"),
    path("manage/news/<int:pk>/delete/", views.NewsDeleteView.as_view(), name="news_delete"),

    # Gallery management
    path("manage/gallery/", views.GalleryManageListView.as_view(), name="gallery_manage"),
    path("manage/gallery/create/", views.GalleryFormView.as_view(), name="gallery_create"),
    path("manage/gallery/<int:pk>/update/", views.GalleryFormView.as_view(), name="gallery_update"),
    path("manage/gallery/<int:pk>/delete/", views.GalleryDeleteView.as_view(), name="gallery_delete"),

    # Programs management
    path("manage/programs/", views.ProgramManageListView.as_view(), name="program_manage"),
    path("manage/programs/create/", views.ProgramFormView.as_view(), name="program_create"),
    path("manage/programs/<int:pk>/update/", views.ProgramFormView.as_view(), name="program_update"),
    path("manage/programs/<int:pk>/delete/", views.ProgramDeleteView.as_view(), name="program_delete"),

    # Cultural programs management
    path("manage/cultural-programs/", views.CulturalManageListView.as_view(), name="cultural_manage"),
    path("manage/cultural-programs/create/", views.CulturalFormView.as_view(), name="cultural_create"),
    path("manage/cultural-programs/<int:pk>/update/", views.CulturalFormView.as_view(), name="cultural_update"),
    path("manage/cultural-programs/<int:pk>/delete/", views.CulturalDeleteView.as_view(), name="cultural_delete"),
]
