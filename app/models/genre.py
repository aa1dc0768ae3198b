from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.database import Base


class Genre(Base):
    """
    Genre model - Category that groups movies
    A genre cannot be removed while movies still reference it
    """
    __tablename__ = "genres"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(150), nullable=False)

    # Relationships
    # passive_deletes="all" keeps the ORM from nulling out movie.genre_id,
    # so the store's RESTRICT is what answers a forbidden delete
    movies = relationship("Movie", back_populates="genre", passive_deletes="all")

    def __repr__(self):
        return f"<Genre(id={self.id}, title={self.title})>"
