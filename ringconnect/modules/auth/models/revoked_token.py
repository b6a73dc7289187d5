from sqlalchemy import Column, String, DateTime

from ringconnect.db.session import Base
from ringconnect.db.time import utcnow

# Tokens presented to /auth/logout; checked on every authenticated request
class RevokedToken(Base):
    __tablename__ = "revoked_tokens"

    jti = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False)
    revoked_at = Column(DateTime(timezone=True), default=utcnow)
