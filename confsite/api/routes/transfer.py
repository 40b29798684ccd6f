"""CSV export and import routes."""

from fastapi import APIRouter, File, UploadFile
from fastapi.responses import StreamingResponse

from confsite.api.deps import CurrentUser, DBSession
from confsite.api.errors import service_errors
from confsite.services.csv_transfer import CSVTransferService, TransferDataset

router = APIRouter(prefix="/transfer", tags=["transfer"])


@router.get("/{dataset}/export")
async def export_dataset(
    dataset: TransferDataset,
    current_user: CurrentUser,
    db: DBSession,
) -> StreamingResponse:
    """Download a collection as CSV."""
    csv_data = await CSVTransferService(db).export_csv(dataset)
    return StreamingResponse(
        iter([csv_data]),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={dataset.filename}"},
    )


@router.post("/{dataset}/import")
async def import_dataset(
    dataset: TransferDataset,
    current_user: CurrentUser,
    db: DBSession,
    file: UploadFile = File(...),
) -> dict:
    """Replace a whole collection with the rows of an uploaded CSV file."""
    content = await file.read()
    with service_errors():
        imported = await CSVTransferService(db).import_csv(dataset, content)
    return {"dataset": dataset.value, "imported": imported}
