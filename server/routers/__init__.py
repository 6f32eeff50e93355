from routers.contact import contact_router

__all__ = [
    "contact_router",
]
