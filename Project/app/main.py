import sys
import os
import streamlit as st
import pandas as pd
import matplotlib.pyplot as plt

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from fpcore import option
from fpcore.config import settings
from fpcore.folds import fold_right
from fpcore.pipeline import process_form, validate_forms, admit_forms
from fpcore.service import (
    department_of,
    lookup_by_name,
    manager_of,
    mean,
    parse_insurance_rate_quote,
    parse_insurance_rate_quote_either,
    parse_int,
    variance,
)
from fpcore.transforms import load_seed_either, age_stats, departments


def show_option(label, opt):
    st.write(f"**{label}:** `{opt!r}`")


st.title("Handling errors without exceptions")

section = st.sidebar.radio("Sections", ["Home", "Option", "Either", "Validated", "Employees", "Statistics"])

if "data_loaded" not in st.session_state:
    st.session_state.data_loaded = False

# --- Home ---
if section == "Home":
    st.subheader("Seed data")
    seed_path = st.text_input("Seed file", str(settings.seed_path))

    if st.button("Load data"):
        loaded = load_seed_either(seed_path)
        if loaded.is_right():
            employees, forms, quotes = loaded.get_or_else(lambda: ((), (), ()))
            st.session_state.employees = employees
            st.session_state.forms = forms
            st.session_state.quotes = quotes
            st.session_state.data_loaded = True
            st.success("Data loaded")
        else:
            st.error(loaded.fold(str, str))

    if st.session_state.data_loaded:
        col1, col2, col3 = st.columns(3)
        col1.metric("Employees", len(st.session_state.employees))
        col2.metric("Forms", len(st.session_state.forms))
        col3.metric("Quotes", len(st.session_state.quotes))

# --- Option ---
elif section == "Option":
    st.header("Option")
    raw = st.text_input("Comma separated integers", "1,2,3")
    items = tuple(s.strip() for s in raw.split(",")) if raw else ()

    parsed = tuple(map(parse_int, items))
    st.table(pd.DataFrame({"input": items, "parse_int": [repr(p) for p in parsed]}))

    show_option("sequence", option.sequence(parsed))
    show_option("traverse", option.traverse(items, parse_int))
    show_option("filter(even)", parse_int(items[0] if items else "").filter(lambda n: n % 2 == 0))
    show_option("fold_right sum", option.traverse(items, parse_int).map(lambda ns: fold_right(ns, 0, lambda n, acc: n + acc)))

    st.subheader("Insurance quote")
    age = st.text_input("Age", "30")
    tickets = st.text_input("Speeding tickets", "1")
    show_option("parse_insurance_rate_quote", parse_insurance_rate_quote(age, tickets))

# --- Either ---
elif section == "Either":
    st.header("Either")
    age = st.text_input("Age", "thirty")
    tickets = st.text_input("Speeding tickets", "1")
    quote = parse_insurance_rate_quote_either(age, tickets)
    if quote.is_right():
        st.success(f"Quote: {quote.get_or_else(lambda: 0.0):.2f}")
    else:
        st.error(quote.fold(str, str))

    if st.session_state.data_loaded:
        st.subheader("Admit all forms (fail-fast)")
        admitted = admit_forms(st.session_state.forms)
        st.write(admitted.fold(lambda errors: f"First bad form: {list(errors)}",
                               lambda persons: f"{len(persons)} persons admitted"))

# --- Validated ---
elif section == "Validated":
    st.header("Validated")
    name = st.text_input("Name", "")
    age = st.text_input("Age", "-1")
    result = process_form({"name": name, "age": age})
    if result["status"] == "ok":
        st.success(f"Person: {result['name']}, {result['age']}")
    else:
        for error in result["errors"]:
            st.warning(error)

    if st.session_state.data_loaded:
        st.subheader("All seed forms")
        rows = [{"form": i, **{k: v for k, v in process_form(f).items() if k != "person"}}
                for i, f in enumerate(st.session_state.forms)]
        st.table(pd.DataFrame(rows).astype(str))
        st.write(validate_forms(st.session_state.forms).fold(
            lambda errors: f"{len(errors)} errors across all forms",
            lambda persons: f"all {len(persons)} forms valid",
        ))

# --- Employees ---
elif section == "Employees":
    st.header("Employees")
    if not st.session_state.data_loaded:
        st.warning("Load the seed data on the Home page first.")
        st.stop()

    employees = st.session_state.employees
    st.table(pd.DataFrame([
        {"name": e.name, "department": e.department, "manager": e.manager.get_or_else(lambda: "-")}
        for e in employees
    ]))

    name = st.text_input("Look up", "Joe")
    show_option("lookup_by_name", lookup_by_name(employees, name).map(lambda e: e.name))
    show_option("department_of", department_of(employees, name))
    show_option("manager_of", manager_of(employees, name))
    st.json(departments(employees))

# --- Statistics ---
elif section == "Statistics":
    st.header("Statistics")
    raw = st.text_input("Values", "1, 2, 3, 4")
    values = option.traverse([s for s in raw.split(",") if s.strip()], lambda s: parse_int(s.strip()))
    nums = values.get_or_else(lambda: ())
    show_option("mean", values.flat_map(mean))
    show_option("variance", values.flat_map(variance))

    if nums:
        plt.figure(figsize=(6, 3))
        plt.plot(nums, marker="o")
        st.pyplot(plt.gcf())
        plt.close()

    if st.session_state.data_loaded:
        persons = validate_forms(st.session_state.forms).fold(
            lambda errors: tuple(p["person"] for p in map(process_form, st.session_state.forms) if p["status"] == "ok"),
            lambda persons: persons,
        )
        stats = age_stats(persons)
        if stats:
            st.table(pd.DataFrame([stats]))
            plt.figure(figsize=(6, 3))
            plt.bar([p.name.value for p in persons], [p.age.value for p in persons])
            plt.axhline(stats["mean"], color="red", linestyle="--", label="mean")
            plt.ylabel("Age")
            plt.legend()
            st.pyplot(plt.gcf())
            plt.close()
        else:
            st.info("No valid persons")
