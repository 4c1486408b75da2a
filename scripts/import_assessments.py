import csv
import sys
from datetime import date
from sqlalchemy.orm import Session
from database.db import SessionLocal
from models.assessments import Assessment as AssessmentModel  # ✅ model import
from routers.subjects import find_user_subject                  # ✅ same ownership rule as POST /assessments
from schemas.assessments import AssessmentCreate               # ✅ same validation as POST /assessments

CSV_PATH = "data/assessments.csv"  # ✅ default file path

# expected header:
# subject_id,name_assessment,type_quarter,type_activity,mode,score,total_items,date_taken


def import_assessments(db: Session, user_id: int, csv_path: str = CSV_PATH) -> int:
    """
    Validates every row, then inserts them in one commit. Returns the number of rows imported.

    Raises ValueError (and imports nothing) when a row points at a subject `user_id` does not own.
    """
    rows = []
    owned = {}
    with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.DictReader(csvfile)
        for row in reader:
            record = AssessmentCreate(
                subject_id=int(row["subject_id"]),
                name_assessment=row["name_assessment"],
                type_quarter=row["type_quarter"],
                type_activity=row["type_activity"],
                mode=row["mode"],
                score=float(row["score"]),
                total_items=float(row["total_items"]),
                date_taken=date.fromisoformat(row["date_taken"]) if row.get("date_taken") else None,
            )
            if record.subject_id not in owned:
                owned[record.subject_id] = find_user_subject(db, user_id, record.subject_id) is not None
            if not owned[record.subject_id]:
                raise ValueError(f"line {reader.line_num}: subject {record.subject_id} not found for user {user_id}")
            rows.append(
                AssessmentModel(
                    **record.model_dump(mode="json", exclude={"date_taken"}),
                    date_taken=record.date_taken,
                    user_id=user_id,
                )
            )

    db.add_all(rows)
    db.commit()
    return len(rows)


if __name__ == "__main__":
    # usage: python -m scripts.import_assessments <user_id> [csv_path]
    db: Session = SessionLocal()
    try:
        count = import_assessments(db, int(sys.argv[1]), *sys.argv[2:3])
    finally:
        db.close()
    print(f"✅ assessments CSV → DB: {count} rows imported")
