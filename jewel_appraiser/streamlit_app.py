# Entry script for `streamlit run`; Streamlit executes it outside the package.
from jewel_appraiser.app import main

main()
