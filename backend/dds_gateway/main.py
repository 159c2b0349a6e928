from fastapi import FastAPI
from dds_gateway.api import instances

app = FastAPI(
    title="DDS Gateway API",
    version="1.0.0",
    description="Provisioning API for DDS document-database instances.",
)

# Include routers
app.include_router(instances.router)
