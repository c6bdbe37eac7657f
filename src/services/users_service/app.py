from src.services.common import create_service_app
from src.services.users_service.routes import router
from src.common.constants import USERS_SERVICE_PORT

app = create_service_app(
    title="User Service",
    service_name="user-service",
    liveness_text="User Service Running ✅",
    description="Identity store: account records (name, email)",
    routers=[router],
)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "src.services.users_service.app:app",
        host="0.0.0.0",
        port=USERS_SERVICE_PORT,
    )
