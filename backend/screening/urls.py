from django.urls import path

from screening import views

urlpatterns = [
    path('evaluate', views.EvaluateAPIView.as_view(), name='evaluate-api'),
    path('policies', views.PolicyListAPIView.as_view(), name='policy-list-api'),
    path('policies/<str:policy_id>', views.PolicyDetailAPIView.as_view(), name='policy-detail-api'),
    path('scenarios', views.ScenarioListAPIView.as_view(), name='scenario-list-api'),
    path('scenarios/<str:scenario_id>', views.ScenarioDetailAPIView.as_view(), name='scenario-detail-api'),
    path('health', views.HealthAPIView.as_view(), name='health-api'),
]
