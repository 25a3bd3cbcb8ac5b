from .supabase_store import SupabaseStore, create_supabase_client

__all__ = [
    "SupabaseStore",
    "create_supabase_client",
]
