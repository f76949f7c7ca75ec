import streamlit as st
import random
import time
import numpy as np
import pandas as pd
import plotly.graph_objects as go
from binary_stride.searches import NOT_FOUND, SEARCHES, bisection_search, find_crossover
from binary_stride.utils import ProbeCounter, count_probes, counting_predicate, first_positive_index, missing_value_near
from binary_stride.data_loader import DISTRIBUTIONS, generate_sorted_data

st.set_page_config(page_title="Binary Stride Dashboard", layout="wide")

st.title("Binary Stride vs Binary Search")
st.markdown("Watch how each search probes a sorted array, and benchmark them against each other.")

st.sidebar.header("Configuration")

st.sidebar.subheader("Dataset")
distribution = st.sidebar.radio(
    "Distribution",
    options=list(DISTRIBUTIONS),
    help="'duplicates' produces long runs of equal values"
)
dataset_size = st.sidebar.number_input(
    "Dataset Size",
    min_value=2,
    max_value=2000000,
    value=1000,
    step=1000,
    help="Number of sorted values to generate"
)
seed = st.sidebar.number_input("Random Seed", min_value=0, max_value=2**31 - 1, value=42)

num_runs = st.sidebar.number_input(
    "Number of Benchmark Runs",
    min_value=1,
    max_value=1000,
    value=50,
    help="Number of random queries to average results over"
)
miss_rate = st.sidebar.slider(
    "Miss Rate",
    min_value=0.0,
    max_value=1.0,
    value=0.0,
    step=0.05,
    help="Fraction of queries for values that are not in the array"
)

st.sidebar.subheader("Methods to Benchmark")
selected_methods = [
    name for name in SEARCHES
    # Full scan is O(n) per query
    if st.sidebar.checkbox(name, value=(name != "Full Scan"), key=f"run_{name}")
]


@st.cache_data
def load_values(size, dist, data_seed):
    return generate_sorted_data(size, distribution=dist, seed=data_seed)


values = load_values(int(dataset_size), distribution, int(seed))

col_stats1, col_stats2, col_stats3, col_stats4 = st.columns(4)
with col_stats1:
    st.metric("Total Values", f"{len(values):,}")
with col_stats2:
    st.metric("Min Value", f"{values[0]:,}")
with col_stats3:
    st.metric("Max Value", f"{values[-1]:,}")
with col_stats4:
    st.metric("Unique Values", f"{len(set(values)):,}")

tab_trace, tab_crossover, tab_benchmark = st.tabs(["Probe Trace", "Crossover", "Benchmark"])


def probe_trace_figure(traces, title):
    """Plots probe step against probed index for each search."""
    colors = {'Binary Search': 'steelblue', 'Binary Stride': 'darkorange'}
    fig = go.Figure()
    for name, probes in traces.items():
        fig.add_trace(go.Scatter(
            x=list(range(1, len(probes) + 1)),
            y=probes,
            mode='lines+markers',
            line=dict(color=colors.get(name, 'seagreen'), width=2),
            marker=dict(size=7),
            name=f"{name} ({len(probes)} probes)",
            hovertemplate='Step %{x}<br>Index %{y}<extra></extra>'
        ))
    fig.update_layout(
        title=title,
        xaxis_title="Probe Step",
        yaxis_title="Probed Index",
        height=450,
        hovermode='x unified',
        yaxis=dict(range=[-1, len(values)])
    )
    return fig


with tab_trace:
    st.subheader("Probe Trace")
    st.markdown("Binary search jumps to the middle and goes left or right. "
                "Binary stride walks left to right with jumps of n/2, n/4, ... 1.")

    needle_index = st.slider("Needle position in array", min_value=0, max_value=len(values) - 1,
                             value=len(values) // 3)
    needle_missing = st.checkbox("Search for a missing value next to it")
    needle = missing_value_near(values, values[needle_index] + 1) if needle_missing else values[needle_index]
    st.caption(f"Needle: {needle:,}")

    traces = {}
    found = {}
    for name in ["Binary Search", "Binary Stride"]:
        counter = ProbeCounter(values)
        found[name] = SEARCHES[name](counter, needle)
        traces[name] = counter.probes

    st.plotly_chart(probe_trace_figure(traces, f"Probes while searching for {needle:,}"),
                    use_container_width=True)

    col1, col2 = st.columns(2)
    for col, name in zip([col1, col2], traces):
        with col:
            result = "not found" if found[name] == NOT_FOUND else f"index {found[name]:,}"
            st.metric(name, result, f"{len(traces[name])} probes", delta_color="off")


with tab_crossover:
    st.subheader("Crossover Point")
    st.markdown("Find where the graph of f(x) = x - t becomes positive. "
                "The stride traversal only needs the sign of f at each probed index.")

    threshold = st.slider("Threshold t", min_value=int(values[0]) - 1, max_value=int(values[-1]) + 1,
                          value=int(values[len(values) // 2]))

    predicate = counting_predicate(lambda i: values[i] - threshold <= 0)
    crossover = find_crossover(predicate, len(values))

    # Sample the curve so large arrays stay plottable
    sample_idx = np.unique(np.linspace(0, len(values) - 1, num=min(len(values), 500)).astype(int))
    fx = [values[i] - threshold for i in sample_idx]

    cross_fig = go.Figure()
    cross_fig.add_trace(go.Scatter(
        x=sample_idx,
        y=fx,
        mode='lines',
        line=dict(color='darkblue', width=3),
        name='f(x)'
    ))
    cross_fig.add_trace(go.Scatter(
        x=predicate.probes,
        y=[values[i] - threshold for i in predicate.probes],
        mode='markers',
        marker=dict(size=9, color='darkorange'),
        name='Probes'
    ))
    if crossover < len(values):
        cross_fig.add_vline(x=crossover, line=dict(color='red', dash='dash'))
    cross_fig.add_hline(y=0, line=dict(color='gray', width=1))
    cross_fig.update_layout(
        title="f(x) over the array",
        xaxis_title="Index",
        yaxis_title="f(x)",
        height=450,
        showlegend=True
    )
    st.plotly_chart(cross_fig, use_container_width=True)

    if crossover < len(values):
        st.success(f"f becomes positive at index {crossover:,} after {len(predicate.probes)} evaluations.")
    else:
        st.info(f"f never becomes positive ({len(predicate.probes)} evaluations).")
    st.caption(f"first_positive_index agrees: {first_positive_index(values, lambda x: x - threshold) == crossover}")


def run_benchmark_pipeline():
    """Run the benchmark over random queries"""
    progress_bar = st.progress(0)
    status_text = st.empty()

    all_results = {name: {'times': [], 'comps': [], 'successes': []} for name in selected_methods}
    rng = random.Random(int(seed))

    status_text.text(f"Running {num_runs} benchmark queries...")

    for run in range(num_runs):
        progress_bar.progress(int(100 * run / num_runs))

        search_query = rng.choice(values)
        if rng.random() < miss_rate:
            search_query = values[-1] + 1

        # Use binary search as reference even if not shown
        found_idx_bs = bisection_search(values, search_query)

        for name in selected_methods:
            search = SEARCHES[name]
            start_time = time.perf_counter()
            found_idx = search(values, search_query)
            end_time = time.perf_counter()

            _, comparisons = count_probes(search, values, search_query)

            if found_idx == NOT_FOUND:
                success = found_idx_bs == NOT_FOUND
            else:
                success = values[found_idx] == search_query

            all_results[name]['times'].append((end_time - start_time) * 1e6)
            all_results[name]['comps'].append(comparisons)
            all_results[name]['successes'].append(success)

    progress_bar.progress(100)
    status_text.text("Benchmark complete!")

    results_data = []
    for name, data in all_results.items():
        results_data.append({
            'Method': name,
            'Avg Time (µs)': f"{np.mean(data['times']):.2f}",
            'Avg Comparisons': f"{np.mean(data['comps']):.2f}",
            'Max Comparisons': int(np.max(data['comps'])),
            'Success Rate': f"{np.mean(data['successes']) * 100:.1f}%",
        })

    return pd.DataFrame(results_data)


if 'results' not in st.session_state:
    st.session_state.results = None

with tab_benchmark:
    run_benchmark = st.button("Run Benchmark", type="primary")

    if run_benchmark:
        if not selected_methods:
            st.warning("Please select at least one method to benchmark!")
        else:
            with st.spinner("Running benchmark..."):
                st.session_state.results = run_benchmark_pipeline()
                st.session_state.data_size = len(values)

    if st.session_state.results is not None:
        st.subheader("Benchmark Results")

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Dataset Size", f"{st.session_state.data_size:,} values")
        with col2:
            st.metric("log2(n)", f"{np.log2(st.session_state.data_size):.2f}")
        with col3:
            st.metric("Benchmark Runs", num_runs)

        st.dataframe(st.session_state.results, use_container_width=True, hide_index=True)

        time_tab, comps_tab = st.tabs(["Average Time", "Average Comparisons"])

        with time_tab:
            chart_data = st.session_state.results.copy()
            chart_data['Avg Time (µs)'] = chart_data['Avg Time (µs)'].astype(float)
            st.bar_chart(chart_data.set_index('Method')['Avg Time (µs)'])

        with comps_tab:
            chart_data = st.session_state.results.copy()
            chart_data['Avg Comparisons'] = chart_data['Avg Comparisons'].astype(float)
            st.bar_chart(chart_data.set_index('Method')['Avg Comparisons'])
    else:
        st.info("Configure your benchmark settings in the sidebar and click 'Run Benchmark' to start.")
