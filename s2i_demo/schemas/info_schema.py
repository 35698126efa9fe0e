from pydantic import BaseModel, Field


class AppInfoResponse(BaseModel):
    message: str = Field(..., description="Description of how the application was built")
    application: str = Field(..., description="Application identifier")
    environment: str = Field(..., description="Deployment environment label")
