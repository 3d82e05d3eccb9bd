from fastapi import APIRouter, Depends
from app.api import deps
from app.api.endpoints import (
    auth, blog, categories, classes, locations, messages, portfolio,
    services, team, testimonials,
)

api_router = APIRouter()
api_router.include_router(auth.router, tags=["auth"])

# Public site
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(locations.router, prefix="/locations", tags=["locations"])
api_router.include_router(classes.router, prefix="/classes", tags=["classes"])
api_router.include_router(services.router, prefix="/services", tags=["services"])
api_router.include_router(portfolio.router, prefix="/portfolio", tags=["portfolio"])
api_router.include_router(team.router, prefix="/team", tags=["team"])
api_router.include_router(testimonials.router, prefix="/testimonials", tags=["testimonials"])
api_router.include_router(blog.router, prefix="/blog", tags=["blog"])
api_router.include_router(messages.router, prefix="/messages", tags=["messages"])

# Admin dashboard
admin_router = APIRouter(dependencies=[Depends(deps.get_current_admin)])
admin_router.include_router(categories.admin_router, prefix="/categories")
admin_router.include_router(locations.admin_router, prefix="/locations")
admin_router.include_router(classes.admin_router, prefix="/classes")
admin_router.include_router(services.admin_router, prefix="/services")
admin_router.include_router(portfolio.admin_router, prefix="/portfolio")
admin_router.include_router(team.admin_router, prefix="/team")
admin_router.include_router(testimonials.admin_router, prefix="/testimonials")
admin_router.include_router(blog.admin_router, prefix="/blog")
admin_router.include_router(messages.admin_router, prefix="/messages")
api_router.include_router(admin_router, prefix="/admin", tags=["admin"])


@api_router.get("/health")
async def health_check():
    return {"status": "ok"}
