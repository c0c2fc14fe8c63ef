"""Write the grand total of all recorded sales to the results file."""
import logging
from typing import Dict

from utils.file_manager import data_path, read_config, sales_file, write_json
from models import store
from models.aggregator import grand_total

LOG = logging.getLogger(__name__)

def write_report() -> Dict:
    cfg = read_config()
    payload = {"totalSales": grand_total(store.load(sales_file()))}
    write_json(cfg["results_file"], payload)
    LOG.info("total sales written to %s: %s", data_path(cfg["results_file"]), payload["totalSales"])
    return payload

if __name__ == "__main__":
    logging.basicConfig(level=read_config().get("log_level", "INFO"))
    write_report()
