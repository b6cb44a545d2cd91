import json
from typing import Optional

import redis.asyncio as redis
from medtransport.core.config import settings

class RedisClient:
    def __init__(self):
        self.redis = redis.from_url(settings.REDIS_URL, encoding="utf-8", decode_responses=True)

    async def set_token(self, token: str, value: dict, expire: int):
        await self.redis.set(f"token:{token}", json.dumps(value), ex=expire)

    async def get_token(self, token: str) -> Optional[dict]:
        raw = await self.redis.get(f"token:{token}")
        if raw is None:
            return None
        return json.loads(raw)

    async def delete_token(self, token: str):
        await self.redis.delete(f"token:{token}")

    async def close(self):
        await self.redis.aclose()

redis_client = RedisClient()
