from sqlalchemy import Column, Integer, String, Float, Date, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base


class Movie(Base):
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(150), nullable=False)
    director = Column(String(150), nullable=False)
    description = Column(String(350), nullable=True)
    price = Column(Float, nullable=False)
    release_date = Column(Date, nullable=False)
    genre_id = Column(Integer, ForeignKey("genres.id", ondelete="RESTRICT"), nullable=False, index=True)

    # Relationships
    genre = relationship("Genre", back_populates="movies")

    @property
    def genre_name(self):
        """Title of the related genre, if it was loaded with the movie"""
        genre = self.__dict__.get("genre")
        return genre.title if genre is not None else None

    def __repr__(self):
        return f"<Movie(id={self.id}, title={self.title}, genre_id={self.genre_id})>"
