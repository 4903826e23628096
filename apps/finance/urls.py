from django.urls import path

from . import views

app_name = "finance"

urlpatterns = [
    # Student fee view
    path("fees/", views.StudentFeesView.as_view(), name="student_fees"),
    path("fees/receipt/<str:transaction_id>/", views.download_receipt, name="receipt"),

    # Fee Structure management
    path("manage/fees/", views.FeeStructureListView.as_view(), name="fee_structure_list"),
    path("manage/fees/create/", views.FeeStructureFormView.as_view(), name="fee_structure_create"),
    path("manage/fees/<int:pk>/update/", views.FeeStructureFormView.as_view(), name="fee_structure_update"),
    path("manage/fees/<int:pk>/delete/", views.FeeStructureDeleteView.as_view(), name="fee_structure_delete"),
]
