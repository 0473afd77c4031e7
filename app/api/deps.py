from fastapi import Request

from app.services.dashboard import DoctorDashboard


def get_dashboard(request: Request) -> DoctorDashboard:
    """애플리케이션에 연결된 대시보드 서비스를 반환"""
    return request.app.state.dashboard
